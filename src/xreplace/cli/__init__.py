"""Command-line interface for xreplace."""
