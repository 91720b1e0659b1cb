"""Text preprocessing applied before layout."""
