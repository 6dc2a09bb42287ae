"""
docchat - session-scoped document chat with retrieval-augmented generation.
"""

__version__ = "0.1.0"
