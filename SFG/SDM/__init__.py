# =============================================================================
# SDM — Symbol Definition Module
# Subfolder of SFG (Sensor Frame Generator)
# =============================================================================
#
# Turns the three definition texts into immutable, fully expanded tables.
#
# Modules:
#   scanner.py      — token scanner and integer conversion shared by all texts
#   resolver.py     — expands one token into symbolic values
#   definitions.py  — DefinitionStore: nucleotide and fragment loaders
#   distribution.py — DistributionTable: cell ranges + per-frame values
#
# Constants live in SFG/SMM/constants.py
# Frame generation lives in SFG/SGM/
# =============================================================================
