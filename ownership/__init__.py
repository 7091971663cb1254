"""Ownership engine: canonical property-owner records from raw assessor strings."""

__version__ = "0.1.0"
