"""Pourfolio - wine cellar tracking with label and receipt scanning."""

__version__ = "0.4.0"
