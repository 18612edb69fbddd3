import dataclasses
import enum
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .tables import (
    ELIGIBLE_CHARS,
    HOMOGLYPH_VALUES,
    HOMOGLYPHS,
    VARIATION_SELECTOR_END,
    VARIATION_SELECTOR_START,
    VARIATION_SELECTOR_SUPPLEMENT_END,
    VARIATION_SELECTOR_SUPPLEMENT_START,
)

logger = logging.getLogger(__name__)

DEFAULT_COVER = "\U0001F44D"


class StegoError(ValueError):
    """Base class for encoding failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCover(StegoError):
    pass


class InvalidMessage(StegoError):
    pass


class InsufficientCapacity(StegoError):
    def __init__(self, hidden: int, required: int, remaining: int):
        super().__init__(
            "cover text is not long enough to encode message. "
            f"Capacity: {hidden}. Required: {required}. Remaining: {remaining}",
            details={"hidden": hidden, "required": required, "remaining": remaining},
        )
        self.hidden = hidden
        self.required = required
        self.remaining = remaining


class MethodNotImplemented(StegoError):
    def __init__(self, method: Any):
        name = method.value if isinstance(method, enum.Enum) else method
        super().__init__(
            f"method {name!r} is not implemented", details={"method": name}
        )
        self.method = method


def _message_bytes(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidMessage(
            f"message is not valid text: {exc.reason}",
            details={"start": exc.start, "end": exc.end},
        ) from exc


def _to_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def get_char(byte: int) -> str:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte {byte} out of range 0..255")
    if byte < 16:
        code_point = VARIATION_SELECTOR_START + byte
    else:
        code_point = VARIATION_SELECTOR_SUPPLEMENT_START + byte - 16
    return chr(code_point)


def get_byte(char: str) -> Optional[int]:
    code_point = ord(char)
    if VARIATION_SELECTOR_START <= code_point <= VARIATION_SELECTOR_END:
        return code_point - VARIATION_SELECTOR_START
    if (
        VARIATION_SELECTOR_SUPPLEMENT_START
        <= code_point
        <= VARIATION_SELECTOR_SUPPLEMENT_END
    ):
        return code_point - VARIATION_SELECTOR_SUPPLEMENT_START + 16
    return None


def encode_emoji(text: str, cover: str) -> str:
    """Append one invisible variation selector per UTF-8 byte of ``text``.

    ``cover`` must be a single code point; it is kept as the visible part of
    the output.
    """
    if len(cover) != 1:
        raise InvalidCover(
            "cover text must be exactly one character long",
            details={"cover_length": len(cover)},
        )
    data = _message_bytes(text)
    logger.debug("Hiding %d bytes behind %r", len(data), cover)
    return cover + "".join(get_char(byte) for byte in data)


def decode_emoji(text: str) -> str:
    """Collect every variation selector in ``text``; everything else is ignored."""
    buffer = bytearray()
    for char in text:
        byte = get_byte(char)
        if byte is not None:
            buffer.append(byte)
    logger.debug("Recovered %d bytes from %d characters", len(buffer), len(text))
    return _to_text(bytes(buffer))


def bytes_to_bits(data: bytes) -> List[bool]:
    # Least significant bit first within each byte
    return [bool((byte >> shift) & 1) for byte in data for shift in range(8)]


def bits_to_bytes(bits: Iterable[bool]) -> bytes:
    """Pack LSB-first bits into bytes.

    An incomplete trailing group of fewer than 8 bits is dropped.
    """
    out = bytearray()
    current = 0
    count = 0
    for bit in bits:
        if bit:
            current |= 1 << count
        count += 1
        if count == 8:
            out.append(current)
            current = 0
            count = 0
    if count:
        logger.debug("Dropping %d trailing bits", count)
    return bytes(out)


def homoglyph_capacity(cover: str) -> int:
    return sum(1 for char in cover if char in HOMOGLYPHS)


def encode_homoglyph(text: str, cover: str) -> str:
    """Hide one bit of ``text`` in each base character of ``cover``.

    Look-alikes already present in the cover are copied unchanged and will
    read back as 1 bits, corrupting the recovered message.
    """
    bits = bytes_to_bits(_message_bytes(text))
    required = len(bits)
    logger.debug(
        "Hiding %d bits in cover with capacity %d", required, homoglyph_capacity(cover)
    )

    output: List[str] = []
    hidden = 0
    for char in cover:
        if hidden < required and char in HOMOGLYPHS:
            output.append(HOMOGLYPHS[char] if bits[hidden] else char)
            hidden += 1
        else:
            output.append(char)

    if hidden < required:
        raise InsufficientCapacity(hidden, required, required - hidden)

    return "".join(output)


def decode_homoglyph(text: str) -> str:
    """Read one bit per eligible character: look-alikes are 1, base characters 0.

    Unused cover capacity decodes as zero bits, so trailing NUL bytes are
    stripped from the recovered data before it is turned back into text.
    """
    bits = [char in HOMOGLYPH_VALUES for char in text if char in ELIGIBLE_CHARS]
    data = bits_to_bytes(bits).rstrip(b"\x00")
    logger.debug("Recovered %d bytes from %d bits", len(data), len(bits))
    return _to_text(data)


class Method(enum.Enum):
    EMOJI = "emoji"
    HOMOGLYPH = "homoglyph"


@dataclasses.dataclass(frozen=True)
class Codec:
    encode: Callable[[str, str], str]
    decode: Callable[[str], str]


CODECS = MappingProxyType(
    {
        Method.EMOJI: Codec(encode=encode_emoji, decode=decode_emoji),
        Method.HOMOGLYPH: Codec(encode=encode_homoglyph, decode=decode_homoglyph),
    }
)


def resolve_method(method: Union[Method, str]) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(str(method).lower())
    except ValueError:
        raise MethodNotImplemented(method) from None


def get_codec(method: Union[Method, str]) -> Codec:
    resolved = resolve_method(method)
    codec = CODECS.get(resolved)
    if codec is None:
        raise MethodNotImplemented(resolved)
    return codec


def encode(method: Union[Method, str], text: str, cover: str) -> str:
    return get_codec(method).encode(text, cover)


def decode(method: Union[Method, str], text: str) -> str:
    return get_codec(method).decode(text)


@dataclasses.dataclass
class CodecConfig:
    method: Method
    cover: str = DEFAULT_COVER

    def __post_init__(self) -> None:
        self.method = resolve_method(self.method)

    def to_dict(self) -> dict:
        return {"method": self.method.value, "cover": self.cover}

    @classmethod
    def from_dict(cls, data: dict) -> "CodecConfig":
        if "method" not in data:
            raise ValueError("method is required")
        cover = data.get("cover")
        if cover is None:
            cover = DEFAULT_COVER
        return cls(method=resolve_method(data["method"]), cover=str(cover))

    def encode(self, text: str) -> str:
        return encode(self.method, text, self.cover)

    def decode(self, text: str) -> str:
        return decode(self.method, text)


__all__ = [
    "DEFAULT_COVER",
    "StegoError",
    "InvalidCover",
    "InvalidMessage",
    "InsufficientCapacity",
    "MethodNotImplemented",
    "get_char",
    "get_byte",
    "encode_emoji",
    "decode_emoji",
    "bytes_to_bits",
    "bits_to_bytes",
    "homoglyph_capacity",
    "encode_homoglyph",
    "decode_homoglyph",
    "Method",
    "Codec",
    "CODECS",
    "resolve_method",
    "get_codec",
    "encode",
    "decode",
    "CodecConfig",
]
