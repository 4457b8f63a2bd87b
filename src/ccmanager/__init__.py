"""cc-manager: compose Claude Code project configuration from plugins."""

__version__ = "0.1.0"
