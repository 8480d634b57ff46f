"""Textual user interface for blockjump."""
