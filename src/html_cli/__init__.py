"""
HTML CLI - line-oriented editing of simplified HTML documents.
"""

__version__ = "0.1.0"
