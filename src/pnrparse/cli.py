"""
Command line validation of a single personnummer.

Usage:
    pnrparse 811218-9876
    pnrparse 121218+9870 --format "YYYYMMDD-NNNN"
    pnrparse 19121218-9870 --strict --json
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from pnrparse import __version__
from pnrparse.config import Settings
from pnrparse.personnummer import parse
from pnrparse.schemas import ParseOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pnrparse",
        description="Validate and normalise a Swedish personnummer or coordination number",
    )
    parser.add_argument("number", help="Personnummer, e.g. 811218-9876")
    parser.add_argument(
        "--forgiving",
        action="store_true",
        default=None,
        help="Correct a separator that contradicts the age",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject age/separator contradictions and future birth dates",
    )
    parser.add_argument(
        "--format",
        dest="normalise_format",
        help="Normalisation template, e.g. YYYYMMDD-NNNN",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
        overrides = {
            key: value
            for key, value in (
                ("forgiving", args.forgiving),
                ("strict", args.strict),
                ("normalise_format", args.normalise_format),
            )
            if value is not None
        }
        # Revalidate so flag values go through the same checks as settings
        options = ParseOptions.model_validate(
            {**settings.parse_options().model_dump(), **overrides}
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug(
        "Parsing with forgiving=%s strict=%s", options.forgiving, options.strict
    )

    result = parse(args.number, options)

    if args.json:
        print(result.model_dump_json())
    elif result.valid:
        print(result.normalised)
    else:
        print(f"Invalid personnummer: {result.reason.value}", file=sys.stderr)

    return EXIT_OK if result.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
