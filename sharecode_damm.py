#
# Damm style check digit extended to base 32
# See https://stackoverflow.com/questions/23431621/extending-the-damm-algorithm-to-base-32
#
from const import BASE, DAMM32_POLY
from sharecode_symbols import symbol_of


class ShareCodeDamm:

    def __init__(self, digits) -> None:
        self.digits = list(digits)

    def integer(self) -> int:
        return self.damm32(self.digits)

    def symbol(self) -> str:
        return symbol_of(self.integer())

    def verify(self) -> bool:
        # digits must already end with their check digit
        return self.integer() == 0

    def inspect(self) -> dict:
        return {
            "digits": self.digits,
            "symbol": self.symbol(),
            "integer": self.integer(),
        }

    @staticmethod
    def damm32(digits) -> int:
        checksum = 0
        for digit in digits:
            checksum ^= digit
            checksum <<= 1
            if checksum >= BASE:
                checksum ^= DAMM32_POLY
        return checksum
