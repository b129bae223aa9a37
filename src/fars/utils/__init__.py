"""
FARS Utilities

Modules:
- coerce:  Total int coercion for years and state codes
- logging: JSON log formatter and package logger setup
"""
