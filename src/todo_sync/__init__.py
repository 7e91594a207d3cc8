"""Console todo list mirrored between a REST API and a local cache."""

__version__ = "0.1.0"
