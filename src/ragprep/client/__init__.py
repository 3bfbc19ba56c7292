"""Command-line entry points for ragprep."""
