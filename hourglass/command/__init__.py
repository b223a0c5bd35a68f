"""Command trees built on top of the CLI framework."""
