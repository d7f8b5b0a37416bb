"""Teller-desk banking: accounts, service queue, undo stack, sorted listings and text-file storage."""

__version__ = "0.1.0"