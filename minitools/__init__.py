"""Small command-line tools: calculator, contact book, file analyzer and tiny HTTP server."""

__version__ = "0.1.0"