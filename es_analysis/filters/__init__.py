"""Analysis filter models."""
