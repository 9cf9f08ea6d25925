"""
Base-1024 bit packing: 5-byte chunks to 4-symbol groups and back.
"""

from Base1024.codec.encoder import (
    encode_chunk,
    encode_symbols,
    encode_stream,
    pack_values,
    chunk_layout,
    ChunkLayout,
)
from Base1024.codec.decoder import (
    decode_group,
    decode_stream,
    unpack_values,
    group_length,
    find_malformed,
    DecoderState,
)
from Base1024.codec.batch import encode_buffer, decode_buffer

__all__ = [
    "encode_chunk",
    "encode_symbols",
    "encode_stream",
    "pack_values",
    "chunk_layout",
    "ChunkLayout",
    "decode_group",
    "decode_stream",
    "unpack_values",
    "group_length",
    "find_malformed",
    "DecoderState",
    "encode_buffer",
    "decode_buffer",
]
