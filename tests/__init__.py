"""Test suite for the antigravity-ua package.

Run tests with:
    pytest tests/
    pytest tests/ -v  # verbose output
"""
