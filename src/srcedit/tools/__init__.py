"""
Tools for srcedit.

The locator walks the source root for matching files; the pipeline runner
drives the external editor, formatter and checker.
"""

from .locator import Locator
from .pipeline import PipelineRunner

__all__ = ['Locator', 'PipelineRunner']
