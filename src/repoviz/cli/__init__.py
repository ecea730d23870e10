"""Command line interface for repoviz."""
