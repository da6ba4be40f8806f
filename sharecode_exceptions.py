class ShareCodeException(Exception):
    "Generic exception class for this library"
    pass


class ShareCodeOutOfRange(ShareCodeException):

    def __init__(self, number, message=None) -> None:
        self.number = number
        super().__init__(message or f"number {number} is out of range")


class ShareCodeInvalidCharacter(ShareCodeException):

    def __init__(self, normalized: str) -> None:
        self.normalized = normalized
        super().__init__(f"string '{normalized}' contains invalid characters")


class ShareCodeChecksumMismatch(ShareCodeException):

    def __init__(self, symbol: str, normalized: str) -> None:
        self.symbol = symbol
        self.normalized = normalized
        super().__init__(f"invalid check value '{symbol}' for string '{normalized}'")


class ShareCodeInvalidLength(ShareCodeException):

    def __init__(self, normalized: str) -> None:
        self.normalized = normalized
        super().__init__(f"string '{normalized}' has invalid length {len(normalized)}")


class ShareCodeEmpty(ShareCodeException):

    def __init__(self) -> None:
        super().__init__("ShareCode is empty, call from_number or from_string first")
