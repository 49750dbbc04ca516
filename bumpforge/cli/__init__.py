"""Command line interface for bumpforge."""
