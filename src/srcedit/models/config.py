"""
Configuration data models for srcedit.

This module defines the process-wide settings shared by the locator and the
pipeline runner: the project directory, the source root that is searched,
and the argv of each external tool (editor, formatter, checker).
"""

from typing import Dict, List, Any, Union
from pathlib import Path
import shlex
from pydantic import BaseModel, Field, ValidationError, field_validator

from .results import StageName
from ..errors import ConfigurationError


def _split_command(v: Union[str, List[str]], field_name: str) -> List[str]:
    """Normalize a command given as a shell-style string or an argv list."""
    if isinstance(v, str):
        v = shlex.split(v)
    if not isinstance(v, (list, tuple)):
        raise ValueError(f"{field_name} must be a string or a list of strings")

    argv = [str(part) for part in v]
    if not argv:
        raise ValueError(f"{field_name} command cannot be empty")
    if any(not part.strip() for part in argv):
        raise ValueError(f"{field_name} command contains a blank argument")
    return argv


class SrceditConfig(BaseModel):
    """
    Settings for one srcedit invocation.

    Attributes:
        project_dir: Working directory for every stage
        source_root: Directory searched by the locator, relative to project_dir
        editor: Interactive editor argv; matched paths are appended
        formatter: Formatter argv, run over the whole project
        checker: Static checker argv, run over the whole project
        include_hidden: Whether to descend into and match dot-entries
    """

    project_dir: str = Field(".", description="Working directory for every stage")
    source_root: str = Field("src", description="Directory searched by the locator")
    editor: List[str] = Field(default_factory=lambda: ["vim"], description="Editor command")
    formatter: List[str] = Field(default_factory=lambda: ["cargo", "fmt"], description="Formatter command")
    checker: List[str] = Field(default_factory=lambda: ["cargo", "check"], description="Checker command")
    include_hidden: bool = Field(False, description="Whether to include hidden files and directories")

    @field_validator('project_dir')
    @classmethod
    def validate_project_dir(cls, v: str) -> str:
        """Expand user path and require an existing directory."""
        if not v or not v.strip():
            raise ValueError("project_dir cannot be empty")
        path = Path(v).expanduser()
        if not path.is_dir():
            raise ValueError(f"Project directory does not exist: {path}")
        return str(path)

    @field_validator('source_root')
    @classmethod
    def validate_source_root(cls, v: str) -> str:
        """Keep relative roots relative so reported paths read like 'src/...'."""
        if not v or not v.strip():
            raise ValueError("source_root cannot be empty")
        if v.startswith('~'):
            return str(Path(v).expanduser())
        return v

    @field_validator('editor', 'formatter', 'checker', mode='before')
    @classmethod
    def validate_command(cls, v, info) -> List[str]:
        return _split_command(v, info.field_name)

    def get_project_path(self) -> Path:
        """Get the project directory as a Path."""
        return Path(self.project_dir)

    def get_root_path(self) -> Path:
        """Get the source root as it should be walked from the current process."""
        root = Path(self.source_root)
        if root.is_absolute():
            return root
        return self.get_project_path() / root

    def command_for(self, stage: StageName) -> List[str]:
        """Return a copy of the argv configured for a stage."""
        commands = {
            StageName.EDIT: self.editor,
            StageName.FORMAT: self.formatter,
            StageName.CHECK: self.checker,
        }
        return list(commands[stage])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SrceditConfig':
        """Create configuration from a dictionary."""
        return cls(**data)

    def __str__(self) -> str:
        return (
            f"SrceditConfig(root={self.source_root}, "
            f"editor={shlex.join(self.editor)}, "
            f"formatter={shlex.join(self.formatter)}, "
            f"checker={shlex.join(self.checker)})"
        )


def load_config(**overrides: Any) -> SrceditConfig:
    """
    Build the configuration from defaults plus keyword overrides.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        Validated SrceditConfig

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return SrceditConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
