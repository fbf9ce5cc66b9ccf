import sys
import argparse

from . import __version__
from .batch import TransformOptions, transform
from .engine import CODEC_REGISTRY, CodecId, Direction, resolve_codec
from .log import log_info, set_verbose
from .panel import decode_all, encode_all

# ==========================================
#  CLI LOGIC
# ==========================================

def codec_arg(value: str) -> CodecId:
    codec_id = resolve_codec(value)
    if codec_id is None:
        choices = ", ".join(c.value for c in CodecId)
        raise argparse.ArgumentTypeError(f"unknown codec '{value}' (choose from {choices})")
    return codec_id


def list_codecs():
    """Print all available codecs and exit."""
    print("\nAvailable Codecs:")
    print("=" * 72)
    for codec_id, codec in CODEC_REGISTRY.items():
        print(f"  {codec_id.value:<10} {codec.title:<18} {codec.description}")
        plain, encoded = codec.example
        if plain:
            print(f"  {'':<10} {'':<18} e.g. {plain!r} -> {encoded!r}")
    print("=" * 72)
    print(f"\nTotal: {len(CODEC_REGISTRY)} codec(s) registered.")


def format_all(results) -> str:
    lines = []
    for codec_id, outcome in results:
        title = CODEC_REGISTRY[codec_id].title
        body = outcome.text if outcome.ok else f"[error: {outcome.detail}]"
        lines.append(f"{title}:\n{body}\n")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ce-codec",
        description="Text/binary codec engine: Base64, Base58, Morse, Quoted-Printable and more.",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k.value:<10}: {v.description}" for k, v in CODEC_REGISTRY.items())
    parser.add_argument("-m", "--method", type=codec_arg, default=CodecId.BASE64, metavar="CODEC",
                        help=f"Select codec by id or display name (default: base64).\n{method_help}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available codecs")

    parser.add_argument("-a", "--all", action="store_true",
                        help="Run every codec instead of only --method (with -e or -d)")
    parser.add_argument("--multiline", action="store_true",
                        help="Transform each line separately; bad lines become [invalid input: ...]")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[CODEC] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    if args.list:
        list_codecs()
        sys.exit(0)

    # 1. READ INPUT
    source_text = read_source(args)
    if args.decode and not args.multiline:
        # Trailing newline from files / pipes is not part of the encoded payload
        source_text = source_text.rstrip("\r\n")

    # 2. TRANSFORM
    direction = Direction.ENCODE if args.encode else Direction.DECODE
    options = TransformOptions(multiline=args.multiline)

    if args.all:
        log_info(f"Running {direction.value} with all {len(CODEC_REGISTRY)} codecs.")
        run_all = encode_all if args.encode else decode_all
        result = format_all(run_all(source_text, options))
    else:
        codec_id = args.method
        log_info(f"Running {codec_id.value} {direction.value} on {len(source_text)} char(s).")
        outcome = transform(codec_id, direction, source_text, options)
        if not outcome.ok:
            label = "Encode" if args.encode else "Decode"
            sys.exit(f"{label} Error ({codec_id.value}): {outcome.detail}")
        result = outcome.text

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                if args.decode: f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)


if __name__ == "__main__":
    main()
