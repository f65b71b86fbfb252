"""Command-line interface for tagcorr."""
