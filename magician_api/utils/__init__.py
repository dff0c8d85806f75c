"""Utility helpers package: request body parsing and field-presence checks."""
