"""
Watch a Steam app branch and report when its published build changes.
"""

__version__ = "0.1.0"
