"""Helpers for the steps of a container image release workflow."""

__version__ = "0.1.0"
