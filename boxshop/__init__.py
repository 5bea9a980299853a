"""Web shop building blocks: HTML templates, response headers, validation and shop records."""

__version__ = "0.1.0"