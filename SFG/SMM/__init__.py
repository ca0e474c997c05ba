# =============================================================================
# SFG/SMM/__init__.py — Sensor Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the sensor chip geometry and the
# run configuration.
#
# All other SFG sub-modules (SDM, SGM, SVM) import their constants from here.
# Never define chip constants outside this module.
#
# Sub-modules:
#   constants.py  — row size, byte width, text-format markers, defaults
#   config.py     — SensorConfig record and configuration-file loader
# =============================================================================
