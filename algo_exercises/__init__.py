"""Standalone algorithm exercises and the harness that checks them."""

__version__ = "0.1.0"
