"""A tiny single-threaded HTTP/1.1 server with static pages, a JSON order service and a TCP echo pair."""

__version__ = "0.1.0"
__all__ = ["request", "response", "handler", "router", "server", "echo"]