# File: building_shell_generator/host/__init__.py
"""
Host integration layer.

Usage:
    from building_shell_generator.host import HostAdapter, LevelInfo
    from building_shell_generator.host.revit_adapter import RevitHostAdapter
"""

from .adapter import HostAdapter, LevelInfo

__all__ = ["HostAdapter", "LevelInfo"]
