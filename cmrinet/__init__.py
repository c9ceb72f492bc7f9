"""Addresses, frame building and byte-by-byte frame receiving for CMRInet networks."""

__version__ = "0.1.3"