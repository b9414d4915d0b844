"""Command-line interface for zedbridge."""
