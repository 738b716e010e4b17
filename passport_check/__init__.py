"""passport-check — batch validation of blank-line-delimited passport records."""

__version__ = "1.0.0"
