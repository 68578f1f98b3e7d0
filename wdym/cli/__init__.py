"""Command line interface for wdym."""
