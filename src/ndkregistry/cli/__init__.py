"""Command-line interface for ndkregistry."""
