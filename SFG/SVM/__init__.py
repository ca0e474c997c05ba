# =============================================================================
# SFG/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# Tools for inspecting generated pattern files and the definitions behind
# them.
#
# Sub-modules:
#   frame_reader.py  — reads a pattern file back as frames; cell trace
#                      (CLI + importable)
#   dictionary.py    — fragment / distribution length report
# =============================================================================
