"""
Base1024 - binary-to-text encoding with a 1024-symbol alphabet

Packs 5 bytes into 4 symbols of 10 bits each, like Base64 with a much larger
alphabet, and keeps the length of the original data through a small set of
padding sentinels.
"""

from Base1024.version import __version__

from Base1024.interface.codec import Base1024, get_encoder, get_decoder
from Base1024.interface.encoder import Encoder
from Base1024.interface.decoder import Decoder

from Base1024.codec.encoder import encode_chunk, encode_stream
from Base1024.codec.decoder import decode_group, decode_stream
from Base1024.codec.batch import encode_buffer, decode_buffer

from Base1024.alphabet import Alphabet, Slot, get_alphabet, set_alphabet, AlphabetContext
from Base1024.config import CodecConfig
from Base1024.errors import Base1024Error, TruncationError, InvalidSymbolError

from Base1024 import alphabet
from Base1024 import codec
from Base1024 import interface
from Base1024 import utils

__all__ = [
    "__version__",
    "Base1024",
    "get_encoder",
    "get_decoder",
    "Encoder",
    "Decoder",
    "encode_chunk",
    "encode_stream",
    "decode_group",
    "decode_stream",
    "encode_buffer",
    "decode_buffer",
    "Alphabet",
    "Slot",
    "get_alphabet",
    "set_alphabet",
    "AlphabetContext",
    "CodecConfig",
    "Base1024Error",
    "TruncationError",
    "InvalidSymbolError",
    "alphabet",
    "codec",
    "interface",
    "utils",
]
