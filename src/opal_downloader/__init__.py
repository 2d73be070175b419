"""
opal-downloader - date window resolution for daily data retrieval.

Parses and validates ``YYYY-MM-DD`` dates in the Australia/Sydney civil
timezone and clamps them into the window for which source data is known to
be published.
"""

__version__ = "0.1.0"
