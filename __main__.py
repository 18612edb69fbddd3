"""CLI shim for running the codec directly from the repository checkout."""

from unistego.cli import main
from unistego.codec import (
    CodecConfig,
    Method,
    decode,
    encode,
)

__all__ = [
    "CodecConfig",
    "Method",
    "decode",
    "encode",
    "main",
]


if __name__ == "__main__":
    main()
