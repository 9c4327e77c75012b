"""
Monthly download statistics reports.
"""

__version__ = "1.0.0"
