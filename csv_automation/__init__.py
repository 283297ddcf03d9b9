"""
CSV automation bot: sorts record files into per-category CSV files.
"""

__version__ = "0.1.0"
