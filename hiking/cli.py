"""
Command line entry point: total time for a hike described by an event file.

Before computing the requested hike, both engines are run on the bundled
fixtures; if they disagree the tool stops, since the optimized result could
not be trusted.

Usage:
    hiking-time                              # bundled example hike
    hiking-time my_hike.yaml --trace-all
    hiking-time small_hike.yaml --mode brute-force --skip-validation
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from hiking.errors import EngineMismatchError, HikingError
from hiking.events import load_events
from hiking.logging_config import configure_logging, get_logger
from hiking.models import ComputeMode
from hiking.session import HikingSession
from hiking.settings import Settings, get_settings
from hiking.solver.trace import TraceOptions
from hiking.validation import validate_engines_agree

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hiking-time",
        description="Compute the time for a group of hikers to cross every bridge on a hike",
    )
    parser.add_argument(
        "event_file",
        nargs="?",
        help="Event file listing hikers and bridges (default: bundled example hike)",
    )
    parser.add_argument(
        "--mode",
        choices=["optimized", "brute-force"],
        help="Engine used for the hike (brute-force is exponential in the roster size)",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Do not cross-check the engines on the bundled fixtures first",
    )
    parser.add_argument("--trace-roster", action="store_true", help="Trace roster additions and ordering")
    parser.add_argument("--trace-intermediate", action="store_true", help="Trace per-bridge and cumulative times")
    parser.add_argument("--trace-steps", action="store_true", help="Trace strategy choices and explored paths")
    parser.add_argument("--trace-timing", action="store_true", help="Trace computation durations")
    parser.add_argument("--trace-all", action="store_true", help="Enable every trace category")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _trace_options(args: argparse.Namespace, settings: Settings) -> TraceOptions:
    if args.trace_all:
        return TraceOptions.all()
    defaults = settings.trace_options()
    return TraceOptions(
        trace_roster=args.trace_roster or defaults.trace_roster,
        trace_intermediate=args.trace_intermediate or defaults.trace_intermediate,
        trace_steps=args.trace_steps or defaults.trace_steps,
        trace_timing=args.trace_timing or defaults.trace_timing,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(source="hiking", debug=args.debug)
    settings = get_settings()

    trace = _trace_options(args, settings)
    mode = settings.compute_mode
    if args.mode:
        mode = ComputeMode.BRUTE_FORCE if args.mode == "brute-force" else ComputeMode.OPTIMIZED
    event_file = args.event_file or settings.resolved_event_file()

    try:
        if settings.validate_engines and not args.skip_validation:
            validate_engines_agree(trace=trace)

        result = load_events(event_file)
        session = HikingSession(mode, trace)
        total = session.run(result.events)
    except EngineMismatchError as e:
        logger.error(f"{e}; exiting as the optimized engine is not giving correct output")
        return 1
    except HikingError as e:
        logger.error(str(e))
        return 1

    if result.diagnostics:
        logger.warning(f"Skipped {len(result.diagnostics)} malformed records in {event_file}")

    print(f"Total time taken to hike: {total:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
