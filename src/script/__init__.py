"""Script-facing service layer.

This module exposes the store to extension scripts behind a rights check.
It turns every store failure into a safe default plus a log entry.
"""
