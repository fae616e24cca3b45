# hicsparse/exceptions.py
"""Custom exception types for the hicsparse library."""

from typing import Optional, Sequence


class HicError(Exception):
    """Base exception for all errors raised by this library."""
    pass


class HicConfigError(HicError):
    """Error related to configuration or setup, such as an unreadable path."""
    pass


class HicFormatError(HicError):
    """
    Error raised when the archive does not match the expected layout.

    Attributes:
        message (str): The primary error message.
        offset (int | None): Absolute file (or block) offset at which the
            failure was detected, when known.
    """
    def __init__(self, message: str, *, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (offset={self.offset})"


class InvalidFormatError(HicFormatError):
    """The magic string is not 'HIC'."""
    def __init__(self, found: bytes):
        super().__init__(
            f"Hi-C magic string is missing (found {found!r}), "
            "does not appear to be a hic file.",
            offset=0,
        )
        self.found = found


class UnsupportedVersionError(HicFormatError):
    """The archive version is older than the oldest supported one."""
    def __init__(self, version: int, *, minimum: int = 6):
        super().__init__(f"Version {version} no longer supported (minimum is {minimum}).")
        self.version = version
        self.minimum = minimum


class ResolutionNotFoundError(HicError):
    """
    The requested bin size is not stored in the archive.

    Attributes:
        requested (int): The resolution asked for.
        available (list[int]): Every resolution the archive does store, in
            file order, so the caller can present them.
    """
    def __init__(self, requested: int, available: Sequence[int]):
        self.requested = requested
        self.available = list(available)
        listing = ", ".join(str(r) for r in self.available) or "none"
        super().__init__(
            f"Cannot find resolution {requested}. Available resolutions: {listing}"
        )


class TruncatedReadError(HicFormatError):
    """Fewer bytes remain than a fixed-width read requires."""
    def __init__(self, offset: int, requested: int, available: int):
        super().__init__(
            f"Unexpected end of data: needed {requested} bytes, {available} available",
            offset=offset,
        )
        self.requested = requested
        self.available = available


class UnterminatedStringError(HicFormatError):
    """A NUL-terminated string runs past the end of the data."""
    def __init__(self, offset: int):
        super().__init__("Null-terminated string has no terminator", offset=offset)


class DecompressionError(HicFormatError):
    """A block's zlib stream is corrupt or incomplete."""
    def __init__(self, message: str, *, offset: int, size: int):
        super().__init__(f"Cannot inflate block of {size} bytes: {message}", offset=offset)
        self.size = size
