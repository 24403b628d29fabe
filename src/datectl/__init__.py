"""datectl — multi-format date parsing with timezone normalization."""

__version__ = "0.1.0"
