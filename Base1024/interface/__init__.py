from Base1024.interface.codec import Base1024, get_encoder, get_decoder
from Base1024.interface.encoder import Encoder, EncoderTarget
from Base1024.interface.decoder import Decoder, DecoderTarget

__all__ = [
    "Base1024",
    "get_encoder",
    "get_decoder",
    "Encoder",
    "EncoderTarget",
    "Decoder",
    "DecoderTarget",
]
