"""Employee record storage.

This package holds the in-memory registry and shared record filters.
"""
