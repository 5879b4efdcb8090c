"""Storage layer.

This module maps identifiers to JSON files under one store root.
It provides the put, get, and exists operations used by callers.
"""
