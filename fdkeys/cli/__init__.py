"""Command-line interface for candidate key discovery."""
