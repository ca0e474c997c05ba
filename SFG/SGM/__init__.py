# =============================================================================
# SGM — Signal Generation Module
# Subfolder of SFG (Sensor Frame Generator)
# =============================================================================
#
# Generates the raw frame stream from the distribution table.
#
# Modules:
#   adc_selector.py  — symbolic value → concrete ADC byte (seeded numpy RNG)
#   capacity.py      — frame-group accounting and the ring-buffer gate
#   frame_builder.py — per-frame filler + overlay synthesis
#   output_writer.py — writes frames sequentially to the output file
#
# Definitions live in SFG/SDM/
# Verification tools live in SFG/SVM/
# =============================================================================
