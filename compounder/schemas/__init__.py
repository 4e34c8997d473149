"""Pydantic data contracts shared by the core and the API."""
