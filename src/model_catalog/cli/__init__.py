"""Command-line interface for the model catalog tools."""
