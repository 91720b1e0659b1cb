"""Shared helpers: errors, logging and file naming."""
