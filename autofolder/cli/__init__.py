"""Command line interface for AutoFolder."""
