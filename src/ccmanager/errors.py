"""Exceptions raised by cc-manager. The CLI turns any of them into exit code 1."""


class CCManagerError(Exception):
    """Base exception for cc-manager errors."""

    pass


class PluginError(CCManagerError):
    """Base exception for plugin lifecycle errors."""

    pass


class PluginNotFoundError(PluginError):
    """Raised when a referenced plugin has no directory."""

    def __init__(self, name: str):
        super().__init__(f'Plugin "{name}" not found.')
        self.name = name


class PluginExistsError(PluginError):
    """Raised when adding a plugin whose directory already exists."""

    def __init__(self, name: str, path):
        super().__init__(f'Plugin "{name}" already exists at {path}')
        self.name = name
        self.path = path


class PluginEnabledError(PluginError):
    """Raised when removing a plugin that is still enabled."""

    def __init__(self, name: str):
        super().__init__(
            f'Cannot remove an enabled plugin. Please disable "{name}" first.'
        )
        self.name = name


class InvalidPluginNameError(PluginError):
    """Raised when a plugin name is not a single directory name."""

    def __init__(self, name: str):
        super().__init__(f"invalid plugin name: {name!r}")
        self.name = name


class SettingsParseError(CCManagerError):
    """Raised when a settings file exists but is not a JSON object."""

    def __init__(self, path, reason: str):
        super().__init__(f"Error parsing {path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentReadError(CCManagerError):
    """Raised when a plugin's CLAUDE.md cannot be decoded as UTF-8."""

    def __init__(self, path, reason: str):
        super().__init__(f"Error reading {path}: {reason}")
        self.path = path
        self.reason = reason


class ResourceExistsError(CCManagerError):
    pass


class ResourceNotFoundError(CCManagerError):
    pass
