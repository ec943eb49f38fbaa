# -*- coding: utf-8 -*-
"""Decompose command.

Reads a JSON network document, splits it into components and
articulations, and writes the result as a JSON report or a text dump.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from cavenet.constants import JSON_ENCODING
from cavenet.enums import ReportFormat
from cavenet.errors import DecompositionError
from cavenet.interface import NetworkInterface
from cavenet.models import DecompositionReport

logger = logging.getLogger(__name__)


def _decompose(
    input_path: Path,
    output_path: Path | None = None,
    report_format: ReportFormat | str = ReportFormat.JSON,
) -> str | None:
    """Decompose a network document.

    Args:
        input_path: Network document (.json)
        output_path: Output file path (None = return as string)
        report_format: ReportFormat or string 'json'/'text'

    Returns:
        The report as string if output_path is None, otherwise None
        (writes to file)

    Raises:
        FileNotFoundError: If input file doesn't exist
        pydantic.ValidationError: If the document is malformed
        DecompositionError: If the network cannot be decomposed
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    report_format = ReportFormat(report_format)

    document = NetworkInterface.load_network_json(input_path)
    decomposition = NetworkInterface.decompose(document)

    match report_format:
        case ReportFormat.JSON:
            report = DecompositionReport.from_decomposition(decomposition)
            result = report.model_dump_json(indent=2)
        case ReportFormat.TEXT:
            result = decomposition.dump()

    if output_path is None:
        return result

    output_path.write_text(result, encoding=JSON_ENCODING)
    return None


def decompose(args: list[str]) -> int:
    """Entry point for the decompose command."""
    parser = argparse.ArgumentParser(
        prog="cavenet decompose",
        description="Split a survey network into solve-ordered chunks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cavenet decompose -i cave.json                   # JSON report (stdout)
  cavenet decompose -i cave.json -o report.json    # JSON report to file
  cavenet decompose -i cave.json -f text           # Text dump (stdout)

Input document:
  {"format": "cavenet_network", "fixed": ["1"],
   "shots": [{"from": "1", "to": "2"}, ...]}
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Network document (.json)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in ReportFormat],
        default=ReportFormat.JSON.value,
        dest="report_format",
        help="Report format: 'json' or 'text' (default: json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the decomposition steps",
    )

    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = _decompose(
            input_path=parsed_args.input_file,
            output_path=parsed_args.output_file,
            report_format=parsed_args.report_format,
        )
    except FileNotFoundError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1
    except ValidationError as e:
        logger.error("Invalid network document: %s", e)  # noqa: TRY400
        return 1
    except DecompositionError as e:
        logger.error("Decomposition failed: %s", e)  # noqa: TRY400
        return 1

    if result is not None:
        sys.stdout.write(result + "\n")

    return 0
