#!/usr/bin/env python3
"""
CSS to Tailwind
Command line entry point: prints the Tailwind classes matching each selector as JSON.
"""

import argparse
import json
import logging
import sys

from core.errors import ConversionError
from core.options import ConverterOptions, DEFAULT_PREPROCESSOR_INPUT
from core.tailwind_converter import TailwindConverter
from utils.file_utils import read_stylesheet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert CSS rules into Tailwind utility classes.")
    parser.add_argument("css_file", help="Stylesheet to convert")
    parser.add_argument("--reference", help="Compiled Tailwind stylesheet (compiled with Node.js when omitted)")
    parser.add_argument("--config", help="tailwind.config.js or JSON theme config")
    parser.add_argument("--color-delta", type=float, default=2, help="Max RGBA distance for colors to match")
    parser.add_argument("--full-round", type=float, default=9999, help="Border radius used for fully rounded corners")
    parser.add_argument("--rem", type=float, default=16, help="Pixels per rem")
    parser.add_argument("--em", type=float, default=16, help="Pixels per em")
    parser.add_argument("--preprocessor-input", default=DEFAULT_PREPROCESSOR_INPUT,
                        help="Source fed to tailwindcss when compiling the reference")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    """Main execution function."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    options = ConverterOptions(
        color_delta=args.color_delta,
        full_round=args.full_round,
        rem=args.rem,
        em=args.em,
        preprocessor_input=args.preprocessor_input,
        tailwind_config=args.config,
    )
    try:
        input_css = read_stylesheet(args.css_file)
        reference_css = read_stylesheet(args.reference) if args.reference else None
        results = TailwindConverter(options).convert(input_css, reference_css)
    except (ConversionError, OSError) as e:
        logger.error(f"Conversion failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
