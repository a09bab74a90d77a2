"""JSON REST API for shops and books: configuration, SQLAlchemy storage and a Flask application."""

__version__ = "0.1.0"
__all__ = ["__version__"]