"""drug-browser: browse drugs@FDA application records."""

__version__ = "0.1.0"
