"""
wordhex - hex dump of a file as little-endian 16-bit words.
"""

__version__ = '0.1.0'
