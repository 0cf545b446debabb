"""User-facing errors for Script Picker."""


class ScriptPickerError(Exception):
    """Base class for errors reported to the user as a plain message."""


class ProjectNotFoundError(ScriptPickerError):
    """No package.json exists in the start directory or any parent."""

    def __init__(self, message: str = "No package.json found in current directory or parent directories"):
        super().__init__(message)


class NoScriptsError(ScriptPickerError):
    """package.json parsed but declares no scripts."""

    def __init__(self, message: str = "No scripts found in package.json"):
        super().__init__(message)


class ConfigError(ScriptPickerError):
    """Configuration file could not be loaded."""
