import argparse
import logging
import os
import sys
from typing import Optional

from rasm import manifest
from rasm.errors import RasmError
from rasm.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger("rasm")

MANIFEST_SUFFIXES = (".rasm.toml", ".toml")


def default_output(path: str) -> str:
    """Strip the manifest suffix from ``path``."""
    for suffix in MANIFEST_SUFFIXES:
        if path.endswith(suffix):
            return path[: -len(suffix)]
    return os.path.splitext(path)[0]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="rasm image generator.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a manifest")
    render_parser.add_argument("manifest", help="Input TOML manifest")
    render_parser.add_argument(
        "-o",
        "--output",
        help="Output path without extension (default: manifest path)",
    )

    show_parser = subparsers.add_parser("show", help="Show the parsed manifest")
    show_parser.add_argument("manifest", help="Input TOML manifest")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    try:
        document = manifest.load(args.manifest)
        if args.command == "render":
            output = args.output or default_output(args.manifest)
            base_dir = os.path.dirname(os.path.abspath(args.manifest))
            manifest.render(document, output, base_dir)
        elif args.command == "show":
            pprint(document)
    except (RasmError, OSError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    sys.exit(main())
