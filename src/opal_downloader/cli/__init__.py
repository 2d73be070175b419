"""Command-line interface for opal-downloader."""
