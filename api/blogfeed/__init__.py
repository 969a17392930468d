"""Blog Feed API - paginated read access to users and posts."""

__version__ = "1.0.0"
