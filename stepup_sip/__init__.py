"""Step-up SIP calculator backend."""

__version__ = "0.1.0"
