"""Receipt payload decoding and output formatting."""
