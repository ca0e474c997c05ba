#!/usr/bin/env python3
# =============================================================================
# cli.py — `sfg` Command Line
# =============================================================================
#
# Usage:
#   sfg [--config FILE]                 generate the pattern file
#   sfg [--config FILE] --dict          print the data dictionary instead
#   sfg [--config FILE] --trace CELL    print one cell of an existing file,
#                                       one value per frame
#
#   python -m SFG ...                   same thing
#
# Run order (generation):
#   [1] configuration   → SensorConfig
#   [2] nucleotides     → DefinitionStore
#   [3] fragments       → DefinitionStore (expanded)
#   [4] distributions   → DistributionTable
#   [5] capacity plan   → statistics report; abort if it doesn't fit
#   [6] --dict report, or the output file
#
# Any SynthesisError aborts the run with exit status 1.
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys

from SFG import __version__
from SFG.errors import CapacityError, SynthesisError
from SFG.SMM.config import SensorConfig, load_config
from SFG.SMM.constants import DEFAULT_CONFIG_FILE
from SFG.SDM.definitions import load_fragments, load_nucleotides
from SFG.SDM.distribution import load_distributions
from SFG.SGM.capacity import plan_capacity
from SFG.SGM.frame_builder import FrameSynthesizer
from SFG.SGM.output_writer import write_output_file
from SFG.SVM.dictionary import dictionary_lines
from SFG.SVM.frame_reader import trace_cell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfg",
        description="Sensor Frame Generator: expands nucleotide/fragment/"
                    "distribution definitions into a raw frame file",
    )
    parser.add_argument(
        "--config", "-config", default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file, default {DEFAULT_CONFIG_FILE}",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--trace", "-trace", type=int, metavar="CELL",
        help="Trace one cell (0-based) through the existing output file",
    )
    mode.add_argument(
        "--dict", "-dict", action="store_true",
        help="Display the data dictionary instead of writing the output file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log each loading step",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_trace(config: SensorConfig, cell: int) -> None:
    for value in trace_cell(config.output_file, config.cells_per_frame, cell):
        print(value)
    print()


def run_generate(config: SensorConfig, show_dict: bool) -> None:
    store = load_nucleotides(config.nucleotide_file)
    store = load_fragments(config.fragment_file, store, config.adc_per_nucleotide)
    table = load_distributions(config.distribution_file, store, config.cells_per_frame)

    try:
        plan = plan_capacity(table, config)
    except CapacityError as exc:
        if exc.plan is not None:
            print("\n".join(exc.plan.report_lines()))
        raise

    print("\n".join(plan.report_lines()))

    if show_dict:
        print("\n".join(dictionary_lines(store, table)))
        return

    synth = FrameSynthesizer(table, config)
    write_output_file(config.output_file, synth, plan)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Version {__version__}")

    try:
        config = load_config(args.config)
        if args.trace is not None:
            run_trace(config, args.trace)
        else:
            run_generate(config, args.dict)
    except SynthesisError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
