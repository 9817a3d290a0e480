class SecretDecodeError(ValueError):
    """The secret is not valid base32 and must be rejected as a whole."""


class EmptySecretError(SecretDecodeError):
    def __init__(self) -> None:
        super().__init__('Secret is empty')


class InvalidPaddingCountError(SecretDecodeError):
    def __init__(self, count: int) -> None:
        super().__init__(f'Invalid padding char count {count}')
        self.count = count


class InvalidPaddingPlacementError(SecretDecodeError):
    def __init__(self, position: int) -> None:
        super().__init__(f'Invalid padding char at position {position}')
        self.position = position


class InvalidCharacterError(SecretDecodeError):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f'Invalid char {char!r} in secret at position {position}')
        self.char = char
        self.position = position
