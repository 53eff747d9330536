"""CloudBrowse: terminal browser for public-cloud projects."""

__version__ = "0.1.0"
