"""Building blocks for real-time calls: enums, errors, byte and crypto helpers, models."""

__version__ = "0.1.0"

__all__ = [
    "binary",
    "bignum",
    "encryption",
    "enums",
    "exceptions",
    "hardware",
    "models",
]