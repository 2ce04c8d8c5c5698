"""Workflows used by the new-cli command line."""
