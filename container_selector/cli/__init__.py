"""Command line interface for container-selector."""
