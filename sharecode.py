#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import yaml
from aiorun import run
from const import (
    DAYS_TO_KEEP_LOGS,
    DEFAULT_LOGLEVEL,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOGFILE,
    MAX_NUMBER,
    OUTPUT_INSPECT,
    OUTPUT_PLAIN,
    VERSION,
)
from sharecode_codec import ShareCode
from sharecode_config import ShareCodeConfig
from sharecode_exceptions import ShareCodeException

logging.basicConfig(
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
    level=DEFAULT_LOGLEVEL,
    handlers=[
        logging.StreamHandler(),
    ],
)
_LOGGER = logging.getLogger(__name__)

COMMAND_ENCODE = "encode"
COMMAND_DECODE = "decode"
STDIN_VALUE = "-"


AP_DESCRIPTION = f"""
Shareable Codes
Convert numbers to short, human friendly codes and back.

Codes use the alphabet YBNDRFG8EJKMCPQX0T1VW2SZA345H769 and carry a check
digit that catches any single mistyped character. When decoding, case and
dashes are ignored, I and L are read as 1 and O is read as 0.

$ sharecode encode 123456
DD7D-96YY
$ sharecode decode dd7d96yy
123456

Numbers must be between 1 and {MAX_NUMBER - 1}.
"""


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=AP_DESCRIPTION,
    )

    parser.add_argument(
        "command",
        choices=[COMMAND_ENCODE, COMMAND_DECODE],
        help="Encode numbers to codes or decode codes to numbers",
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help=f"Numbers or codes to convert. Use '{STDIN_VALUE}' to read one value per line from stdin.",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject codes with an implausible length or that decode to 0 (default: from config, else off)",
    )
    parser.add_argument(
        "--inspect",
        action="store_const",
        const=OUTPUT_INSPECT,
        dest="output",
        default=None,
        help="Print every part of each code as YAML",
    )
    parser.add_argument(
        "--plain",
        action="store_const",
        const=OUTPUT_PLAIN,
        dest="output",
        help="Print only the converted value (default: from config, else plain)",
    )
    parser.add_argument(
        "--config_loc",
        type=str,
        metavar="LOC",
        default=Path.home().joinpath(".sharecode"),
        help="The location of the config file with default settings (default: %(default)s)",
    )
    parser.add_argument(
        "--log_loc",
        type=str,
        metavar="LOC",
        default=Path.home(),
        help="The location to store the log files (default: %(default)s)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show Debug level logging. (default: Info)"
    )

    return parser.parse_args(argv)


def read_values(values, stream=None):
    if values != [STDIN_VALUE]:
        return values
    stream = stream or sys.stdin
    return [line.strip() for line in stream if line.strip()]


def convert(command, value, strict=False) -> ShareCode:
    if command == COMMAND_ENCODE:
        return ShareCode().from_number(int(value))
    return ShareCode().from_string(value, strict=strict)


def format_result(command, code: ShareCode, output) -> str:
    if output == OUTPUT_INSPECT:
        return yaml.safe_dump(code.inspect(), sort_keys=False).rstrip()
    if command == COMMAND_ENCODE:
        return code.build()
    return str(code.number)


def run_command(command, values, strict=False, output=OUTPUT_PLAIN, out=None) -> int:
    out = out or sys.stdout
    failures = 0
    for value in values:
        try:
            code = convert(command, value, strict=strict)
        except (ShareCodeException, ValueError) as e:
            _LOGGER.error(f"Unable to {command} '{value}': {e.__class__.__qualname__}: {e}")
            failures += 1
            continue
        print(format_result(command, code, output), file=out)

    if failures:
        _LOGGER.debug(f"{failures} of {len(values)} values failed")
        return 1
    return 0


async def main(args) -> int:
    log_loc = Path(args.log_loc)
    log_loc.mkdir(parents=True, exist_ok=True)
    log_loc = log_loc.joinpath(LOGFILE)
    log_loc.touch(exist_ok=True)
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        level=DEFAULT_LOGLEVEL,
        handlers=[
            logging.StreamHandler(),
            TimedRotatingFileHandler(
                log_loc, when="midnight", backupCount=DAYS_TO_KEEP_LOGS
            ),
        ],
        force=True,
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        # aiorun reports every shutdown step at info level
        logging.getLogger("aiorun").setLevel(logging.WARNING)
    _LOGGER.debug(
        f"Starting Shareable Codes {VERSION} "
        f"(Log Level: {logging.getLevelName(_LOGGER.getEffectiveLevel())})"
    )
    _LOGGER.debug(f"log_loc: {log_loc}")

    config = ShareCodeConfig(args.config_loc)
    await config.load()

    # flags apply to this run only, the config file just supplies defaults
    strict = config.get_strict() if args.strict is None else args.strict
    output = args.output or config.get_output()
    _LOGGER.debug(f"strict: {strict}, output: {output}")

    values = read_values(args.values)
    return run_command(args.command, values, strict=strict, output=output)


async def run_main(args, result: dict):
    try:
        result["status"] = await main(args)
    finally:
        # aiorun keeps the loop running until it is stopped
        asyncio.get_running_loop().stop()


def cli():
    args = parse_args()
    result = {"status": 1}
    run(run_main(args, result), stop_on_unhandled_errors=True)
    sys.exit(result["status"])


if __name__ == "__main__":
    cli()
