"""
Daily Quotes - random quote viewer with tag filters and a short history.
"""

__version__ = "1.0.0"
