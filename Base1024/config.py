"""
Codec configuration for Base1024.
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


ENV_PREFIX = "BASE1024_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass
class CodecConfig:
    """
    Settings shared by the facade, the builders and the command-line tool.

    The bit layout itself is fixed; these only control the text layer,
    buffering, validation strictness and logging.
    """

    text_encoding: str = "utf-8"
    text_errors: str = "strict"
    decode_errors: str = "replace"

    read_size: int = 8192
    vectorize_threshold: int = 4096

    strict: bool = False
    wrap: int = 0

    log_level: str = "WARNING"

    def __post_init__(self):
        if self.read_size <= 0:
            raise ValueError(f"read_size must be positive, got {self.read_size}")
        if self.wrap < 0:
            raise ValueError(f"wrap must not be negative, got {self.wrap}")

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CodecConfig":
        """
        Creates a CodecConfig from ``BASE1024_*`` environment variables.

        ``BASE1024_READ_SIZE=65536`` sets ``read_size``, and so on. Unset
        variables keep their defaults.
        """
        if environ is None:
            environ = os.environ

        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _coerce(f.name, raw, type(f.default))
        return cls(**values)


def _coerce(name: str, raw: str, kind: type):
    if kind is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{ENV_PREFIX}{name.upper()}: expected a boolean, got {raw!r}")
    if kind is int:
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{name.upper()}: expected an integer, got {raw!r}") from None
    return raw
