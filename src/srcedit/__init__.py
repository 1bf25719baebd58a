"""
srcedit - Core Package

Locate source files by pattern, open them in an editor, then format and
check the project, stopping at the first failing step.
"""

__version__ = "0.1.0"
__author__ = "srcedit Team"
