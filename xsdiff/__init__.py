"""
xsdiff: structural comparison of XML Schema documents.

Compares two XSD files, or two folders of XSD files paired through a
schema.lst listing file, and reports complex types, elements, attributes and
annotations that exist on only one side.

Main features:
- Prefix-agnostic extraction of complex types and their members
- Ordered, set-based comparison of two schema models
- Batch runs over folders with a fresh report folder per run
- HTML and spreadsheet reports
"""

__version__ = "1.0.0"
