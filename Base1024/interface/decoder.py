"""
Builder-style decoder interface.
"""

import io
from typing import Any, Optional

from Base1024.alphabet import Alphabet, get_alphabet
from Base1024.codec.batch import decode_buffer
from Base1024.codec.decoder import decode_stream
from Base1024.config import CodecConfig
from Base1024.utils.io import BYTES_LIKE, iter_text_blocks

BINARY_STREAMS = (io.RawIOBase, io.BufferedIOBase)


class Decoder:
    """
    Decodes base-1024 symbol sources back into bytes.

    The whole source is expected to be encoded data: a symbol outside the
    alphabet raises :class:`InvalidSymbolError`, and a symbol count that is
    not a multiple of 4 raises :class:`TruncationError`.

    Usage:
        data = get_decoder().read_from(text).write_to_bytes()
        message = get_decoder().read_from(text).write_to_string()
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

    def read_from(self, source: Any, encoding: Optional[str] = None) -> "DecoderTarget":
        """
        Uses the given object as the symbol source.

        Args:
            source: String, readable text stream or iterable of strings; or
                bytes / a binary stream holding the encoded text
            encoding: Text encoding of a binary source (default: config)

        Returns:
            An intermediate object used to choose the destination
        """
        if isinstance(source, BYTES_LIKE) or isinstance(source, BINARY_STREAMS):
            source = iter_text_blocks(
                source,
                encoding=encoding or self.config.text_encoding,
                errors=self.config.text_errors,
                read_size=self.config.read_size,
            )
        return DecoderTarget(self, source)


class DecoderTarget:
    """Destination half of the decoder builder."""

    def __init__(self, decoder: Decoder, source: Any):
        self.decoder = decoder
        self.source = source

    def write_to(self, sink: Any) -> int:
        """
        Writes the decoded bytes to a binary sink, which is not closed.

        Returns:
            Number of bytes written
        """
        config = self.decoder.config
        return decode_stream(
            self.source,
            sink,
            alphabet=self.decoder.alphabet,
            strict=config.strict,
            read_size=config.read_size,
        )

    def write_to_bytes(self) -> bytes:
        config = self.decoder.config
        if isinstance(self.source, str) and len(self.source) >= config.vectorize_threshold:
            return decode_buffer(self.source, alphabet=self.decoder.alphabet, strict=config.strict)

        out = io.BytesIO()
        self.write_to(out)
        return out.getvalue()

    def write_to_string(self, encoding: Optional[str] = None) -> str:
        """
        Gets the decoded bytes as text.

        Undecodable bytes are replaced according to ``config.decode_errors``
        ("replace" by default) rather than raising.
        """
        config = self.decoder.config
        return self.write_to_bytes().decode(encoding or config.text_encoding, config.decode_errors)
