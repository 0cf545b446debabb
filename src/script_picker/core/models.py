"""Core data models for Script Picker."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator


class PackageManager(str, Enum):
    """Package managers a script can be run through."""

    PNPM = "pnpm"
    BUN = "bun"
    NPM = "npm"

    @classmethod
    def from_value(cls, value: "str | PackageManager") -> "PackageManager":
        """
        Resolve a configured value to a package manager.

        Unrecognized values fall back to npm so that a runnable command can
        always be produced.

        Args:
            value: Package manager name (case-insensitive) or member

        Returns:
            Matching PackageManager, or NPM when the value is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NPM


class Script(BaseModel):
    """A named script declared in the scripts section of package.json."""

    name: str = Field(..., description="Script name (key in the scripts object)")
    command: str = Field(..., description="Shell command the script maps to")


class RunRequest(BaseModel):
    """A formatted shell command and the directory it runs in."""

    command: str = Field(..., description="Shell command handed to the runner")
    cwd: Path = Field(..., description="Working directory (project root)")

    @field_serializer("cwd")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)

    @field_validator("cwd", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string to Path if needed."""
        if isinstance(v, str):
            return Path(v)
        return v


class ProjectInfo(BaseModel):
    """
    Everything resolved about a project for a single invocation.

    Used by the list view; nothing here is cached between invocations.
    """

    root: Path = Field(..., description="Directory containing package.json")
    manifest: Path = Field(..., description="Path to package.json")
    package_manager: PackageManager = Field(
        ..., description="Package manager the scripts will run through"
    )
    scripts: list[Script] = Field(
        default_factory=list, description="Scripts in declaration order"
    )

    @field_serializer("root", "manifest")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON output."""
        return str(path)

    @field_validator("root", "manifest", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string to Path if needed."""
        if isinstance(v, str):
            return Path(v)
        return v

    @property
    def script_names(self) -> list[str]:
        """Script names in declaration order."""
        return [script.name for script in self.scripts]
