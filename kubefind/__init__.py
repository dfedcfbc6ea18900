"""Search Kubernetes objects for a regular expression."""

__version__ = "0.1.0"
