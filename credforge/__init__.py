"""credforge: credential validation and secure token issuance."""

__version__ = "0.1.0"
