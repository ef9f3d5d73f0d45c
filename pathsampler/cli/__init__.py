"""Command-line interface for pathsampler."""
