"""Command line entry point: print metadata of one image file."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from .algo.metadata_extractor import extract_metadata
from .common.errors import ExtractionError
from .common.schemas import DEFAULT_IMAGE_PATH, CliParams
from .report import format_json, format_report
from .utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-meta",
        description="Print file size, creation date, dimensions, color type and camera model of an image",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_IMAGE_PATH,
        help=f"Image file to inspect (default: {DEFAULT_IMAGE_PATH})",
    )
    parser.add_argument("--json", action="store_true", help="Print the metadata as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only accept jpg / jpeg / png / gif / bmp files",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def parse_params(argv: Sequence[str] | None = None) -> CliParams:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return CliParams(
            input_path=args.path,
            output_format="json" if args.json else "text",
            strict=args.strict,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    params = parse_params(argv)
    configure_logging(params.log_level)

    try:
        metadata = extract_metadata(params.input_path, strict=params.strict)
    except ExtractionError as exc:
        logger.debug(f"Extraction failed: {exc.reason}")
        print(f"Error: extraction failed: {exc.path}", file=sys.stderr)
        return 1

    if params.output_format == "json":
        print(format_json(metadata))
    else:
        print(format_report(metadata))
    return 0


if __name__ == "__main__":
    sys.exit(main())
