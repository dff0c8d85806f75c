"""Service layer package.

Holds the mock report builders the protected routes return. They are
pure functions with no I/O, so routes stay thin.
"""
