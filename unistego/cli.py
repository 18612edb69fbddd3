import argparse
import logging
import sys
from typing import List, Optional

from .codec import DEFAULT_COVER, CodecConfig, Method

EXAMPLES = """\
Examples:
  unistego -m emoji encode -t "Hello world"
  unistego -m emoji encode -t "Secret message" -c \U0001F512
  unistego -m emoji decode -t "\U0001F44D..."
  echo "Secret" | unistego -m homoglyph encode -t - -c "$(cat cover.txt)"
"""


def _read_text(value: str) -> str:
    if value != "-":
        return value
    text = sys.stdin.read()
    # Drop the line ending added by echo or a terminal
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _write_text(text: str) -> None:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unistego",
        description="Hide text inside text with invisible Unicode tricks",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--method",
        required=True,
        choices=[method.value for method in Method],
        help="Steganography method",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Encode a message into a cover text")
    enc.add_argument(
        "-t", "--text", required=True, help="Message to encode ('-' reads stdin)"
    )
    enc.add_argument(
        "-c",
        "--cover",
        default=DEFAULT_COVER,
        help="Cover text to encode the message into ('-' reads stdin)",
    )

    dec = subparsers.add_parser("decode", help="Decode a message from a cover text")
    dec.add_argument(
        "-t", "--text", required=True, help="Text to decode ('-' reads stdin)"
    )

    return parser


def run_encode(args) -> None:
    if args.text == "-" and args.cover == "-":
        raise ValueError("only one of --text and --cover can be read from stdin")
    cfg = CodecConfig(method=args.method, cover=_read_text(args.cover))
    _write_text(cfg.encode(_read_text(args.text)))


def run_decode(args) -> None:
    cfg = CodecConfig(method=args.method)
    _write_text(cfg.decode(_read_text(args.text)))


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "encode":
            run_encode(args)
        elif args.command == "decode":
            run_decode(args)
        else:
            parser.error("Unknown command")
    except ValueError as exc:
        parser.error(str(exc))


__all__ = ["build_arg_parser", "run_encode", "run_decode", "main"]
