import logging
from pathlib import Path

import yaml
from const import (
    CONF_YAML,
    DEFAULT_OUTPUT,
    DEFAULT_STRICT,
    OUTPUT_INSPECT,
    OUTPUT_PLAIN,
)

_LOGGER = logging.getLogger(__name__)

CONF_STRICT = "STRICT"
CONF_OUTPUT = "OUTPUT"


class ShareCodeConfig:
    """
    Defaults for the command line, read from a YAML file.

    Command line flags override these values for a single run and are never
    written back.
    """

    def __init__(self, config_loc, filename=CONF_YAML):
        self.config_loc = Path(config_loc).joinpath(filename)
        _LOGGER.debug(f"config_loc: {self.config_loc}")
        self._config = {}

    async def load(self):
        config = {}
        if not self.config_loc.is_file():
            _LOGGER.debug(f"No config at {self.config_loc}, using defaults")
            self._config = config
            return
        try:
            _LOGGER.debug(f"Reading config from {self.config_loc}")
            with open(self.config_loc, "r") as file:
                config = yaml.safe_load(file)
        except (OSError, yaml.YAMLError) as e:
            _LOGGER.warning(f"Can't load {self.config_loc}. ({e.__class__.__qualname__}: {e})")
        if not isinstance(config, dict):
            config = {}
        self._config = config

    def get(self, key, default):
        return self._config.get(key, default)

    def get_strict(self) -> bool:
        return bool(self.get(CONF_STRICT, DEFAULT_STRICT))

    def get_output(self) -> str:
        output = self.get(CONF_OUTPUT, DEFAULT_OUTPUT)
        if output not in (OUTPUT_PLAIN, OUTPUT_INSPECT):
            _LOGGER.warning(f"Unknown {CONF_OUTPUT} '{output}', using {DEFAULT_OUTPUT}")
            return DEFAULT_OUTPUT
        return output
