"""
Add an empty, visible signature field to page 1 of a PDF file.
"""

__version__ = "0.1.0"
