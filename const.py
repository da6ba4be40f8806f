import logging

VERSION = "v0.1.0"

CONF_YAML = "sharecode.yaml"

LOGFILE = "sharecode.log"
LOG_FORMAT = "%(asctime)-20s %(levelname)-9s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOGLEVEL = logging.INFO
DAYS_TO_KEEP_LOGS = 14

# zrockford32: Crockford's Base32 idea with zBase32 alphabet order
SYMBOLS = "YBNDRFG8EJKMCPQX0T1VW2SZA345H769"
BASE = len(SYMBOLS)

# Given code length 7 (excluding check digit) and base 32, the number of codes
# that can be represented is 32^7 = 2^35
MAX_NUMBER = 34359738368

# COPRIME has to be co-prime with MAX_NUMBER, MULINV is its multiplicative
# inverse modulo MAX_NUMBER
COPRIME = 5777025351
MULINV = 1393193079

# Reduction polynomial x^5 + x^2 + 1 for the base 32 Damm checksum
DAMM32_POLY = 37

# Minimum digits before the check digit is appended
MIN_DIGITS = 5

SEPARATOR = "-"
GROUP_SIZE = 4

# Number of symbols (dashes removed) accepted by strict decoding
MIN_CODE_LENGTH = 6
MAX_CODE_LENGTH = 8

# Defaults
DEFAULT_STRICT = False
OUTPUT_PLAIN = "plain"
OUTPUT_INSPECT = "inspect"
DEFAULT_OUTPUT = OUTPUT_PLAIN
