"""Command-line interface for cssdebloat."""
