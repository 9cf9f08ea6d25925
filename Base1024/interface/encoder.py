"""
Builder-style encoder interface.
"""

import io
from typing import Any, Optional

from Base1024.alphabet import Alphabet, get_alphabet
from Base1024.codec.batch import encode_buffer
from Base1024.codec.encoder import encode_stream
from Base1024.config import CodecConfig
from Base1024.utils.io import BYTES_LIKE


class Encoder:
    """
    Encodes byte sources into their base-1024 representation.

    Usage:
        text = get_encoder().read_from(b"hello world").write_to_string()
        count = get_encoder().read_from(open("data.bin", "rb")).write_to(sys.stdout)
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        alphabet: Optional[Alphabet] = None,
    ):
        self.config = config or CodecConfig()
        self._alphabet = alphabet

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet if self._alphabet is not None else get_alphabet()

    def read_from(self, source: Any, encoding: Optional[str] = None) -> "EncoderTarget":
        """
        Uses the given object as the byte source.

        Args:
            source: Bytes-like object, readable binary stream, iterable of
                byte blocks, or a string which is encoded to bytes first
            encoding: Text encoding for a string source (default: config)

        Returns:
            An intermediate object used to choose the destination
        """
        if isinstance(source, str):
            source = source.encode(encoding or self.config.text_encoding, self.config.text_errors)
        return EncoderTarget(self, source)


class EncoderTarget:
    """Destination half of the encoder builder."""

    def __init__(self, encoder: Encoder, source: Any):
        self.encoder = encoder
        self.source = source

    def write_to(self, sink: Any) -> int:
        """
        Writes the encoded symbols to a text sink, which is not closed.

        Returns:
            Number of symbols written
        """
        config = self.encoder.config
        return encode_stream(
            self.source,
            sink,
            alphabet=self.encoder.alphabet,
            read_size=config.read_size,
        )

    def write_to_string(self) -> str:
        if (
            isinstance(self.source, BYTES_LIKE)
            and len(self.source) >= self.encoder.config.vectorize_threshold
        ):
            return encode_buffer(self.source, alphabet=self.encoder.alphabet)

        out = io.StringIO()
        self.write_to(out)
        return out.getvalue()

    def write_to_bytes(self, encoding: Optional[str] = None) -> bytes:
        """Gets the encoded symbols as text in the given encoding (default: config)."""
        config = self.encoder.config
        return self.write_to_string().encode(encoding or config.text_encoding, config.text_errors)
