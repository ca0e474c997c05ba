# =============================================================================
# Sensor Frame Generator (SFG)
# Expands a symbolic definition language into raw sensor test-pattern frames.
# =============================================================================
#
# ── PYTHON OWNS THE WHOLE FRAME PIPELINE ────────────────────────────────────
#
# RESPONSIBLE for:
#   - Symbol Definitions
#       Nucleotides (one-character names → candidate ADC levels) and
#       fragments (named, pre-expanded sequences of symbolic values).
#   - Cell Distribution
#       Every distribution record paints one symbolic value per frame onto
#       a strided range of cells.
#   - Capacity Planning
#       The expanded sequence MUST fit the destination ring buffer, or the
#       run fails outright.  No truncated output, ever.
#   - Frame Synthesis
#       Filler pass, then overlay of every live record, in table order.
#       Nucleotides are sampled at synthesis time, never at expansion time.
#
# NOT responsible for:
#   - Loading the output file into physical RAM (DMA buffer fill).
#   - Checking that the synthesized data is meaningful to the chip.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   nucleotide file   → DefinitionStore   (SDM/definitions.py)
#   fragment file     → DefinitionStore   (SDM/resolver.py expands tokens)
#   distribution file → DistributionTable (SDM/distribution.py)
#   table + config    → CapacityPlan      (SGM/capacity.py)       ← gate
#   table + config    → frames            (SGM/frame_builder.py)
#   frames            → output file       (SGM/output_writer.py)
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/  — Sensor Mapping Module: hardware constants, configuration record
#   SDM/  — Symbol Definition Module: scanner, definitions, resolver,
#           distribution table
#   SGM/  — Signal Generation Module: ADC selector, capacity planner,
#           frame synthesizer, output writer
#   SVM/  — Signal Verification Module: frame reader, cell trace,
#           data dictionary
#   cli.py — `sfg` command line
# =============================================================================

__version__ = "1.4.0"
