"""loan-calc: simple-interest loan registry and schedule calculator."""

__version__ = "0.1.0"
