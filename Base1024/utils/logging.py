import logging
import sys
from typing import Optional, Union

class Base1024Logger:
    def __init__(self, name: str = "Base1024", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: Union[int, str]) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        self.logger.setLevel(level)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def transfer_summary(
        self,
        operation: str,
        consumed: int,
        produced: int,
        **kwargs,
    ) -> None:
        msg = f"{operation} | in: {consumed} | out: {produced}"
        for k, v in kwargs.items():
            if isinstance(v, float):
                msg += f" | {k}: {v:.4f}"
            else:
                msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[Base1024Logger] = None

def get_logger() -> Base1024Logger:
    global _logger
    if _logger is None:
        _logger = Base1024Logger()
    return _logger
