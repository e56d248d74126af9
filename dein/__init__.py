"""Resolve dependency-injection providers and generate the Go wiring code."""

__version__ = "0.1.0"