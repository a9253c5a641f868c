# tests/__init__.py
"""
Test suite for the Markdown builder.
"""

# This file can be empty but makes tests/ a package
