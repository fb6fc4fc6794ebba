"""DNS wire-format record parsing and network transports."""

__version__ = "0.1.0"