"""MilkDirect - direct-to-consumer milk marketplace backend."""

__version__ = "1.0.0"
