"""Unit tests for antigravity-ua.

Platform detection is mocked where a test depends on a specific OS or
architecture; nothing here touches the network.
"""
