"""FIX message model, encoder, parser and a single-client TCP echo server."""

__version__ = "0.1.0"