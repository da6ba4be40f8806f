import logging

from const import BASE, SEPARATOR, SYMBOLS
from sharecode_exceptions import ShareCodeInvalidCharacter

_LOGGER = logging.getLogger(__name__)

DECODE_TABLE = {symbol: digit for digit, symbol in enumerate(SYMBOLS)}

# Visually ambiguous characters and the symbol they are read as
AMBIGUOUS = str.maketrans({"I": "1", "L": "1", "O": "0"})


def symbol_of(digit: int) -> str:
    return SYMBOLS[digit]


def digit_of(symbol: str) -> int:
    return DECODE_TABLE[symbol]


def to_symbols(digits) -> str:
    return "".join(symbol_of(d) for d in digits)


def normalize(string: str) -> str:
    """
    Normalizes user input:
    - Converts string to uppercase (a -> A)
    - Removes dashes (AA-BB -> AABB)
    - Converts ambiguous characters (IiLlOo -> 111100)

    The result contains only symbols from SYMBOLS.
    """
    norm = string.upper().replace(SEPARATOR, "").translate(AMBIGUOUS)
    if not norm or any(s not in DECODE_TABLE for s in norm):
        raise ShareCodeInvalidCharacter(norm)
    _LOGGER.debug(f"normalize '{string}' -> '{norm}'")
    return norm


def to_digits(number: int) -> list:
    """Converts a non-negative integer to base 32 digits, most significant first."""
    digits = []
    while number >= BASE:
        number, remainder = divmod(number, BASE)
        digits.append(remainder)
    digits.append(number)
    digits.reverse()
    return digits


def from_digits(digits) -> int:
    number = 0
    for d in digits:
        number = number * BASE + d
    return number
