"""XRPL wallet explorer: price feed, account lookup, and view state."""

__version__ = "0.1.0"
