"""
CVGEN - Curriculum Vitae GENerator

Turns a single YAML resume profile into formatted output documents.

Architecture:
- Profile Context: YAML profile loading and schema validation
- Rendering Context: Word (.docx) and markdown rendering plus output management
"""

__version__ = "0.1.0"
