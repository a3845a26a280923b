"""
Prompt Marker - a deterministic automarker for prompt-writing exercises.

This package marks short prompts against the Role / Task / Context / Format
structure and protects the marker behind a time-limited, access-code based
session.
"""

__version__ = "1.0.0"
__author__ = "Prompt Marker Team"
