"""Core content conversion pipeline."""
