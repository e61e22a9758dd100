"""CLI command implementations for timr."""
