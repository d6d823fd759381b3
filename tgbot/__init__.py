"""Building blocks for chat bots: HTTP message helpers, clients, a small HTTP server, long polling and API data objects."""

__version__ = "0.1.0"