# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Suggestion Service: CRUD API for suggested names and their geo-locations."""

__version__ = "1.0.0"
