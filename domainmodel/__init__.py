"""domainmodel - currency-aware money, employment income and household value types."""

__version__ = "0.1.0"
