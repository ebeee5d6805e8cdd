"""Helpers for HTTP servers: base64, HTTP dates, URL escaping and canonicalisation, string lists and buffers."""

__version__ = "0.1.0"