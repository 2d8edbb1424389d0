"""Scheduling core for multi-tenant barber shops."""

__version__ = "0.1.0"
