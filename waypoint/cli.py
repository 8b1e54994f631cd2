"""Command-line interface for waypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

from waypoint.dsl.loader import load_path
from waypoint.exceptions import WaypointError
from waypoint.logging import configure_logging, get_logger
from waypoint.model.path import Path
from waypoint.ranges.progression import FloatProgression

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format rows as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_number(value: float) -> str:
    """Return ``value`` with up to six decimals, trailing zeros trimmed.

    Examples:
        0.25 -> "0.25"; 10.0 -> "10"; -0.0 -> "-0".
    """
    s = f"{value:.6f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _read_path(file: FilePath) -> Path:
    logger.info(f"Loading path from: {file}")
    path = load_path(file.read_text())
    logger.info("Path loaded: length=%s, anchors=%d", path.length, len(path))
    return path


def _inspect_path(file: FilePath) -> None:
    """Print the path length and its anchors in ascending progress."""
    try:
        path = _read_path(file)
    except FileNotFoundError:
        logger.error(f"Path file not found: {file}")
        sys.exit(1)
    except (ValueError, WaypointError) as e:
        logger.error(f"Failed to load path: {type(e).__name__}: {e}")
        sys.exit(1)

    print(f"Length: {_format_number(path.length)}")
    print(f"Anchors: {len(path)}")
    rows = [
        [_format_number(key)] + [_format_number(c) for c in position]
        for key, position in path
    ]
    table = _format_table(["progress", "x", "y", "z"], rows)
    if table:
        print(table)
    if len(path) < 2:
        print("Warning: at least two anchors are needed for lookups")


def _sample_path(
    file: FilePath,
    step: Optional[float],
    samples: Optional[int],
    start: Optional[float],
    end: Optional[float],
    output: Optional[FilePath],
) -> None:
    """Sample a path file and emit the positions as JSON."""
    try:
        path = _read_path(file)
        if start is None and end is None:
            progression = path.progression(step=step, samples=samples)
        else:
            base = path.progression(step=step, samples=samples)
            progression = FloatProgression(
                base.first if start is None else start,
                base.last if end is None else end,
                base.step,
            )
        logger.debug("Sampling over %s", progression)
        positions = path.sample(progression)
    except FileNotFoundError:
        logger.error(f"Path file not found: {file}")
        sys.exit(1)
    except (ValueError, WaypointError) as e:
        logger.error(f"Failed to sample path: {type(e).__name__}: {e}")
        sys.exit(1)

    payload: Dict[str, Any] = {
        "length": path.length,
        "samples": [
            {"progress": p, "position": row.tolist()}
            for p, row in zip(progression, positions)
        ],
    }
    json_str = json.dumps(payload, indent=2)

    if output is None:
        print(json_str)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json_str)
    logger.info(f"Wrote {len(positions)} sample(s) to: {output}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``waypoint`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Inspect and sample progress-keyed paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,sample}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Show a path's anchors")
    inspect_parser.add_argument("path", type=FilePath, help="Path to path YAML")

    sample_parser = subparsers.add_parser(
        "sample", help="Sample positions along a path"
    )
    sample_parser.add_argument("path", type=FilePath, help="Path to path YAML")
    group = sample_parser.add_mutually_exclusive_group()
    group.add_argument("--step", "-s", type=float, default=None, help="Progress step")
    group.add_argument(
        "--samples", "-n", type=int, default=None, help="Number of evenly spaced samples"
    )
    sample_parser.add_argument(
        "--start", type=float, default=None, help="First progress (default: first anchor)"
    )
    sample_parser.add_argument(
        "--end", type=float, default=None, help="Last progress (default: last anchor)"
    )
    sample_parser.add_argument(
        "--output",
        "-o",
        type=FilePath,
        default=None,
        help="Write JSON to this file instead of stdout",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        configure_logging(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        configure_logging(logging.WARNING)
    else:
        configure_logging(logging.INFO)

    if args.command == "inspect":
        _inspect_path(args.path)
    elif args.command == "sample":
        _sample_path(
            file=args.path,
            step=args.step,
            samples=args.samples,
            start=args.start,
            end=args.end,
            output=args.output,
        )


if __name__ == "__main__":
    main()
