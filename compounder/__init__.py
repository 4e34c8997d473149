"""Compound growth/decay series calculator with a small Flask API."""

__version__ = "0.1.0"
