"""
blockjump - keyboard-driven fuzzy jump overlay for blocks and patterns
"""

__version__ = "0.1.0"
