"""
Exception types raised by the Base1024 codec.

I/O failures from sources and sinks are not wrapped: they surface as the
``OSError`` raised by the underlying stream.
"""

from typing import Optional


class Base1024Error(ValueError):
    """Base class for all codec errors."""

    def __init__(self, message: str, position: int = 0, bytes_written: int = 0):
        super().__init__(message)
        self.position = position
        self.bytes_written = bytes_written


class TruncationError(Base1024Error):
    """
    The symbol source ended in the middle of a group.

    ``position`` is the number of symbols read in total, ``missing`` the number
    of symbols the last group still needed.
    """

    def __init__(self, position: int, missing: int, bytes_written: int = 0):
        super().__init__(
            f"Unexpected end of data after {position} symbols, "
            f"the number of input symbols is not a multiple of 4 "
            f"({missing} missing)",
            position=position,
            bytes_written=bytes_written,
        )
        self.missing = missing


class InvalidSymbolError(Base1024Error):
    """A symbol is neither part of the alphabet nor a padding sentinel."""

    def __init__(
        self,
        symbol: str,
        position: int,
        bytes_written: int = 0,
        reason: Optional[str] = None,
    ):
        code = f"U+{ord(symbol):04X}" if len(symbol) == 1 else repr(symbol)
        message = reason or "is not a part of the alphabet"
        super().__init__(
            f"Input symbol {code} at position {position} {message}",
            position=position,
            bytes_written=bytes_written,
        )
        self.symbol = symbol
