# File: building_shell_generator/commands/__init__.py
"""Host commands."""

from .create_shell import (
    CreateShellCommand,
    ShellCreationResult,
    HostContext,
    DEFAULT_TRANSACTION_NAME,
)

__all__ = [
    "CreateShellCommand",
    "ShellCreationResult",
    "HostContext",
    "DEFAULT_TRANSACTION_NAME",
]
