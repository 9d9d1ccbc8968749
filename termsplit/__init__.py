"""
termsplit - split position tracking for terminal panels
"""

__version__ = "0.1.0"
