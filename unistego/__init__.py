"""Hide text inside text with variation selectors and homoglyphs."""

from .codec import (
    CODECS,
    DEFAULT_COVER,
    Codec,
    CodecConfig,
    InsufficientCapacity,
    InvalidCover,
    InvalidMessage,
    Method,
    MethodNotImplemented,
    StegoError,
    bits_to_bytes,
    bytes_to_bits,
    decode,
    decode_emoji,
    decode_homoglyph,
    encode,
    encode_emoji,
    encode_homoglyph,
    get_byte,
    get_char,
    get_codec,
    homoglyph_capacity,
)

__all__ = [
    "CODECS",
    "DEFAULT_COVER",
    "Codec",
    "CodecConfig",
    "InsufficientCapacity",
    "InvalidCover",
    "InvalidMessage",
    "Method",
    "MethodNotImplemented",
    "StegoError",
    "bits_to_bytes",
    "bytes_to_bits",
    "decode",
    "decode_emoji",
    "decode_homoglyph",
    "encode",
    "encode_emoji",
    "encode_homoglyph",
    "get_byte",
    "get_char",
    "get_codec",
    "homoglyph_capacity",
]

__version__ = "0.1.0"
