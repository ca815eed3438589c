"""
Text-quality checks for Swedish auction catalog entries.

Flags artist names typed into the title field, misspelled domain vocabulary
and misspelled brand names, each with a suggested correction and a
confidence score.
"""

__version__ = "0.1.0"
