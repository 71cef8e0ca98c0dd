"""Data model for programmable-switch runtime tables, registers, ports and digests."""

__version__ = "0.1.7"