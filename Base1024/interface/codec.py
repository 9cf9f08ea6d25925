"""
Base1024 main codec interface.
"""

from typing import Any, Optional, Union

from Base1024.alphabet import Alphabet, get_alphabet, load_alphabet
from Base1024.config import CodecConfig
from Base1024.interface.encoder import Encoder
from Base1024.interface.decoder import Decoder


class Base1024:
    """
    High-level interface for base-1024 encoding.

    Bundles a configuration and an optional alphabet, and hands out encoders
    and decoders bound to both.

    Usage:
        codec = Base1024()
        text = codec.encode(b"hello world")
        data = codec.decode(text)

        # Custom alphabet listing
        codec = Base1024.from_listing_file("emojis.txt")

        # Streams
        codec.encode_stream(open("in.bin", "rb"), sys.stdout)
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        alphabet: Optional[Alphabet] = None,
    ):
        self.config = config or CodecConfig()
        self._alphabet = alphabet

    @classmethod
    def from_env(cls, alphabet: Optional[Alphabet] = None) -> "Base1024":
        """Creates a codec configured from ``BASE1024_*`` environment variables."""
        return cls(config=CodecConfig.from_env(), alphabet=alphabet)

    @classmethod
    def from_listing_file(
        cls,
        filepath: str,
        config: Optional[CodecConfig] = None,
        **pads: int,
    ) -> "Base1024":
        """
        Creates a codec using an alphabet loaded from a listing file.

        Args:
            filepath: Path to a file of hexadecimal code points
            config: Codec configuration
            **pads: Optional ``pad_full`` / ``pad_0`` code points
        """
        return cls(config=config, alphabet=load_alphabet(filepath, **pads))

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet if self._alphabet is not None else get_alphabet()

    def get_encoder(self) -> Encoder:
        return Encoder(config=self.config, alphabet=self._alphabet)

    def get_decoder(self) -> Decoder:
        return Decoder(config=self.config, alphabet=self._alphabet)

    def encode(self, data: Union[bytes, bytearray, memoryview, str]) -> str:
        """
        Encodes bytes, or a string in the configured text encoding.

        Returns:
            Encoded symbol string
        """
        return self.get_encoder().read_from(data).write_to_string()

    def decode(self, text: Union[str, bytes]) -> bytes:
        """
        Decodes a symbol string (or its bytes in the configured encoding).

        Returns:
            Original bytes
        """
        return self.get_decoder().read_from(text).write_to_bytes()

    def decode_to_string(self, text: Union[str, bytes], encoding: Optional[str] = None) -> str:
        return self.get_decoder().read_from(text).write_to_string(encoding)

    def encode_stream(self, source: Any, sink: Any) -> int:
        return self.get_encoder().read_from(source).write_to(sink)

    def decode_stream(self, source: Any, sink: Any) -> int:
        return self.get_decoder().read_from(source).write_to(sink)


_DEFAULT = Base1024()

def get_encoder() -> Encoder:
    """Gets an encoder with the default configuration and the process-wide alphabet."""
    return _DEFAULT.get_encoder()

def get_decoder() -> Decoder:
    """Gets a decoder with the default configuration and the process-wide alphabet."""
    return _DEFAULT.get_decoder()
