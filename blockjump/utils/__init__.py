"""Utility modules for blockjump."""
