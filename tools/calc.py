#!/usr/bin/env python3.11
from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any
from typing import TextIO

import ppcalc.settings
from ppcalc.logging import Ansi
from ppcalc.logging import configure_logging
from ppcalc.logging import log
from ppcalc.models.performance import BatchPerformanceRequest
from ppcalc.models.performance import PerformanceRating
from ppcalc.models.performance import PerformanceRequest
from ppcalc.usecases.performance import VERSION
from ppcalc.usecases.performance import calculate_performances


def calculate_document(document: dict[str, Any]) -> list[PerformanceRating]:
    """Calculate a single play (`score` key) or a batch (`plays` key)."""
    if "plays" in document:
        request = BatchPerformanceRequest.model_validate(document)
        plays = request.plays
    else:
        request = PerformanceRequest.model_validate(document)
        plays = [request]

    results = calculate_performances(
        request.difficulty.to_attributes(),
        ((play.score.to_statistics(), play.to_mod_set()) for play in plays),
    )

    return [PerformanceRating.from_result(result) for result in results]


def write_ratings(
    ratings: list[PerformanceRating],
    out: TextIO,
    precision: int,
) -> None:
    for idx, rating in enumerate(ratings, 1):
        out.write(
            f"#{idx}: {rating.pp:.{precision}f}pp "
            f"(aim {rating.pp_aim:.{precision}f}, "
            f"speed {rating.pp_speed:.{precision}f}, "
            f"acc {rating.pp_acc:.{precision}f}, "
            f"fl {rating.pp_flashlight:.{precision}f}) "
            f"| {rating.effective_miss_count:.2f} effective misses\n",
        )


def main(argv: Sequence[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]

    parser = argparse.ArgumentParser(
        description=f"Calculate performance ({VERSION}) for finished plays",
    )

    parser.add_argument(
        "file",
        help="JSON document to read (default: stdin)",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
    )
    parser.add_argument(
        "-d",
        "--debug",
        help="Enable debug logging",
        action="store_true",
    )
    parser.add_argument(
        "--json",
        help="Print results as JSON",
        action="store_true",
    )
    parser.add_argument(
        "-p",
        "--precision",
        help="Decimals to display",
        type=int,
        default=ppcalc.settings.PP_DISPLAY_PRECISION,
    )
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug or ppcalc.settings.DEBUG)

    try:
        document = json.load(args.file)
    except json.JSONDecodeError as exc:
        log(f"Invalid JSON input: {exc}", Ansi.LRED)
        return 1

    if not isinstance(document, dict):
        log("Input must be a JSON object", Ansi.LRED)
        return 1

    # pydantic.ValidationError is a ValueError, as are unknown mod acronyms
    try:
        ratings = calculate_document(document)
    except ValueError as exc:
        log(f"Invalid performance request: {exc}", Ansi.LRED)
        return 1

    log(f"Calculated {len(ratings)} play(s)", Ansi.GRAY)

    if args.json:
        json.dump(
            [rating.model_dump() for rating in ratings],
            sys.stdout,
            indent=2,
        )
        sys.stdout.write("\n")
    else:
        write_ratings(ratings, sys.stdout, args.precision)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
