"""A small threaded HTTP server for HTML pages, images and files in the working directory."""

__version__ = "0.1.0"