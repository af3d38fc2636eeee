class SaveToolError(Exception):
    """Base error for save pack/unpack failures."""


class SamePathError(SaveToolError):
    """Raised when the input and output paths of an operation are the same file."""


class SaveIOError(SaveToolError):
    """Raised when a file cannot be opened, read or written."""


class TruncatedInputError(SaveToolError):
    """Raised when a packed save is shorter than the fixed container prefix."""


class CorruptCiphertextError(SaveToolError):
    """Raised when the encrypted payload cannot be decrypted."""


class InvalidPaddingError(CorruptCiphertextError):
    """Raised when the decrypted payload does not end in well-formed PKCS#7 padding."""


class CorruptStreamError(SaveToolError):
    """Raised when the decrypted payload is not a valid zlib stream."""


class InvalidJsonError(SaveToolError):
    """Raised when a payload is not valid JSON.

    Carries the position reported by the JSON parser when one is available.
    """

    def __init__(self, message: str, lineno=None, colno=None, pos=None) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class ConfigError(SaveToolError):
    """Raised when codec settings are missing or out of range."""
