"""
CareerBooster CV Upload API

Thin HTTP boundary that accepts a CV upload, validates it, resolves the
caller's identity and delegates analysis to an external document processor.
"""

__version__ = "0.1.0"
