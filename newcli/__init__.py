"""new-cli: create files from per-user templates."""

__version__ = "0.1.0"
