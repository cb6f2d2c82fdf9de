"""Command-line interface for CONCOURSE."""
