"""League tables: home/away standings and strength analysis from football fixtures."""

__version__ = "0.1.0"
