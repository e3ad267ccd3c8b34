"""Antigravity User-Agent: identification string for upstream API requests.

This package builds the single process-wide User-Agent header value sent with
outbound requests, combining the application version with the running
operating system and CPU architecture.
"""

__version__ = "1.15.8"
