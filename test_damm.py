import unittest

from sharecode_damm import ShareCodeDamm
from sharecode_symbols import (
    DECODE_TABLE,
    digit_of,
    from_digits,
    normalize,
    symbol_of,
    to_digits,
)
from sharecode_exceptions import ShareCodeInvalidCharacter
from const import MAX_NUMBER, SYMBOLS


class TestDamm(unittest.TestCase):

    def test_damm32(self):
        self.assertEqual(0, ShareCodeDamm.damm32([]))
        self.assertEqual(2, ShareCodeDamm.damm32([1]))
        # 16 << 1 overflows and gets reduced: 32 ^ 37
        self.assertEqual(5, ShareCodeDamm.damm32([16]))
        self.assertEqual(27, ShareCodeDamm.damm32([31]))

    def test_check_digit(self):
        damm = ShareCodeDamm([3, 3, 29, 3, 31, 30, 0])
        self.assertEqual(0, damm.integer())
        self.assertEqual("Y", damm.symbol())
        self.assertTrue(ShareCodeDamm([3, 3, 29, 3, 31, 30, 0, 0]).verify())

    def test_verify(self):
        for digits in ([1, 2, 3, 4, 5], [31, 31, 31, 31, 31, 31, 31], [0, 0, 0, 0, 0]):
            check = ShareCodeDamm(digits).integer()
            self.assertTrue(ShareCodeDamm(digits + [check]).verify())
            self.assertFalse(ShareCodeDamm(digits + [check ^ 1]).verify())

    def test_inspect(self):
        data = ShareCodeDamm([1]).inspect()
        self.assertDictEqual({"digits": [1], "symbol": "N", "integer": 2}, data)


class TestSymbols(unittest.TestCase):

    def test_alphabet(self):
        self.assertEqual(32, len(set(SYMBOLS)))
        for ch in "ILOU":
            self.assertNotIn(ch, SYMBOLS)
        for digit in range(32):
            self.assertEqual(digit, digit_of(symbol_of(digit)))
        self.assertEqual(32, len(DECODE_TABLE))

    def test_digits(self):
        self.assertEqual([0], to_digits(0))
        self.assertEqual([31], to_digits(31))
        self.assertEqual([1, 0], to_digits(32))
        self.assertEqual([31] * 7, to_digits(MAX_NUMBER - 1))
        self.assertEqual(32, from_digits([1, 0]))
        self.assertEqual(32, from_digits([0, 0, 1, 0]))
        self.assertEqual(0, from_digits([]))
        for n in (0, 1, 12345, 987654321, MAX_NUMBER - 1):
            self.assertEqual(n, from_digits(to_digits(n)))

    def test_normalize(self):
        self.assertEqual("DD7D96YY", normalize("dd7d-96yy"))
        self.assertEqual("61YEE0F4", normalize("6lYE-EoF4"))
        self.assertEqual("61YEE0F4", normalize("6IYE-EOF4"))

    def test_normalize_invalid(self):
        for string in ("", "--", "AOE0UI", "DD7D_96YY", "ÄBCD"):
            with self.assertRaises(ShareCodeInvalidCharacter):
                normalize(string)


if __name__ == '__main__':
    unittest.main()
