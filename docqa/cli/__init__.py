"""
Command-line interface.

Exports: DocQAShell, parse_question
"""

from docqa.cli.shell import DocQAShell, parse_question

__all__ = ["DocQAShell", "parse_question"]
