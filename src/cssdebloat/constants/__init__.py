"""Constants used across cssdebloat."""
