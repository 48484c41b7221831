"""Command-line interface for envsmart."""
