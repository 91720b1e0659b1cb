"""Page composition: document model, line wrapping and page templates."""
