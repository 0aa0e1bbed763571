"""Release pipeline steps for Maven and container projects."""

__version__ = "0.1.0"
