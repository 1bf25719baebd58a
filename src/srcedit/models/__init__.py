"""
Data models for srcedit.

This module contains the configuration and pipeline result structures.
"""

from .results import StageName, StageResult, PipelineResult
from .config import SrceditConfig, load_config

__all__ = ['StageName', 'StageResult', 'PipelineResult', 'SrceditConfig', 'load_config']
