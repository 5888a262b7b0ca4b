"""Core functionality for container-selector."""
