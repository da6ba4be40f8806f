import logging

from const import (
    COPRIME,
    GROUP_SIZE,
    MAX_CODE_LENGTH,
    MAX_NUMBER,
    MIN_CODE_LENGTH,
    MIN_DIGITS,
    MULINV,
    SEPARATOR,
)
from sharecode_damm import ShareCodeDamm
from sharecode_exceptions import (
    ShareCodeChecksumMismatch,
    ShareCodeEmpty,
    ShareCodeInvalidLength,
    ShareCodeOutOfRange,
)
from sharecode_symbols import digit_of, from_digits, normalize, to_digits, to_symbols

_LOGGER = logging.getLogger(__name__)


#
# Reversible hash using multiplicative inverses, see:
# - https://stackoverflow.com/questions/4273466/reversible-hash-function
# - https://ericlippert.com/2013/11/14/a-practical-use-of-multiplicative-inverses/
#
def mask(number: int) -> int:
    return (number * COPRIME) % MAX_NUMBER


def unmask(masked: int) -> int:
    return (masked * MULINV) % MAX_NUMBER


def encode(number: int) -> str:
    return ShareCode().from_number(number).build()


def decode(string: str, strict=False) -> int:
    return ShareCode().from_string(string, strict=strict).number


class ShareCode:

    def __init__(self) -> None:
        self.number = None
        self.masked = None
        # includes the check digit
        self.digits = None
        self.payload_str = None
        self.check_str = None

    def from_number(self, number: int) -> 'ShareCode':
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Number has to be an integer, got {type(number).__name__}")
        if number >= MAX_NUMBER:
            raise ShareCodeOutOfRange(number, "Number is too large")
        if number <= 0:
            raise ShareCodeOutOfRange(number, "Number has to be a positive integer")

        self.number = number
        self.masked = mask(number)
        digits = to_digits(self.masked)
        while len(digits) < MIN_DIGITS:
            digits.insert(0, 0)
        digits.append(ShareCodeDamm(digits).integer())

        self.digits = digits
        self.payload_str = to_symbols(digits[:-1])
        self.check_str = to_symbols(digits[-1:])
        _LOGGER.debug(f"from_number {number} -> {self.build()}")
        return self

    def from_string(self, string: str, strict=False) -> 'ShareCode':
        norm = normalize(string)
        if strict and not (MIN_CODE_LENGTH <= len(norm) <= MAX_CODE_LENGTH):
            raise ShareCodeInvalidLength(norm)

        digits = [digit_of(s) for s in norm]
        if not ShareCodeDamm(digits).verify():
            raise ShareCodeChecksumMismatch(norm[-1], norm)

        self.digits = digits
        self.payload_str = norm[:-1]
        self.check_str = norm[-1]
        self.masked = from_digits(digits[:-1])
        self.number = unmask(self.masked)

        # 0 can never come out of encode
        if strict and self.number == 0:
            raise ShareCodeOutOfRange(0, f"string '{norm}' decodes to 0")

        _LOGGER.debug(f"from_string '{string}' -> {self.number}")
        return self

    def is_empty(self) -> bool:
        return self.digits is None

    def check_not_empty(self) -> None:
        if self.is_empty():
            raise ShareCodeEmpty()

    def crc(self) -> ShareCodeDamm:
        self.check_not_empty()
        return ShareCodeDamm(self.digits[:-1])

    def build(self) -> str:
        self.check_not_empty()
        code = self.payload_str + self.check_str
        return code[:GROUP_SIZE] + SEPARATOR + code[GROUP_SIZE:]

    def inspect(self) -> dict:
        return {
            "code": self.build(),
            "number": self.number,
            "masked": self.masked,
            "digits": self.digits,
            "payload_str": self.payload_str,
            "check_str": self.check_str,
            "check_computed": self.crc().symbol(),
        }

    def __str__(self):
        if self.is_empty():
            return ""
        return self.build()
