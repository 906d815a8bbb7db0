"""Transference Core: domain model for artifact/receiver matching."""

__version__ = "0.1.0"
