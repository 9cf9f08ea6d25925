from Base1024.utils.logging import get_logger, Base1024Logger
from Base1024.utils.io import (
    iter_byte_blocks,
    iter_byte_chunks,
    iter_text_blocks,
    iter_symbols,
    byte_view,
    ensure_dir,
)
from Base1024.utils.timing import Timer

__all__ = [
    "get_logger",
    "Base1024Logger",
    "iter_byte_blocks",
    "iter_byte_chunks",
    "iter_text_blocks",
    "iter_symbols",
    "byte_view",
    "ensure_dir",
    "Timer",
]
