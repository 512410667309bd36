# File: building_shell_generator/host/adapter.py
"""
Host adapter abstraction.

The shell command never talks to the host document directly. It works
through a HostAdapter, which exposes the handful of host capabilities the
command needs: named lookups, a few read-only queries, element creation and
a transaction scope. Handles returned by an adapter are opaque to the
command and only ever passed back to the same adapter.

Implementations:
    - RevitHostAdapter (host/revit_adapter.py): Revit API via pythonnet/IronPython
    - Test doubles in tests/conftest.py
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Any, Optional

from building_shell_generator.geometry.primitives import Line3D, Point3D
from building_shell_generator.geometry.roof import GableProfile, RoofExtrusion


@dataclass(frozen=True)
class LevelInfo:
    """A resolved level: its host handle, name and elevation (internal units)."""
    handle: Any
    name: str
    elevation: float


class HostAdapter(ABC):
    """Abstract base class for host application adapters.

    Lookup and query methods must not modify the document. Creation
    methods are only called inside ``transaction()``.
    """

    @property
    @abstractmethod
    def host_name(self) -> str:
        """Return a human-readable name for the host."""
        ...

    # -------------------------------------------------------------------------
    # Lookups and queries
    # -------------------------------------------------------------------------

    @abstractmethod
    def find_level(self, name: str) -> Optional[LevelInfo]:
        """Find a level by exact name.

        Returns:
            LevelInfo, or None if no level has that name
        """
        ...

    @abstractmethod
    def resolve_family_type(
        self, category: str, type_name: str, family_name: str
    ) -> Optional[Any]:
        """Find a family type by category, type name and family name.

        Args:
            category: Host category name (e.g., "OST_Doors", "OST_Roofs")
            type_name: Name of the type within its family
            family_name: Name of the family

        Returns:
            Type handle, or None if nothing matches
        """
        ...

    @abstractmethod
    def default_wall_type(self) -> Any:
        """Return the wall type new walls are created with."""
        ...

    @abstractmethod
    def type_thickness(self, type_handle: Any) -> float:
        """Return the total thickness of a wall or roof type in internal units."""
        ...

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    @abstractmethod
    def transaction(self, name: str) -> AbstractContextManager:
        """Open a transaction scope.

        The returned context manager commits on normal exit and rolls back
        if the block raises.
        """
        ...

    @abstractmethod
    def create_wall(self, centerline: Line3D, wall_type: Any, base_level: LevelInfo) -> Any:
        """Create a wall along ``centerline`` standing on ``base_level``."""
        ...

    @abstractmethod
    def set_wall_top_level(self, wall: Any, top_level: LevelInfo) -> None:
        """Constrain the top of ``wall`` to ``top_level``."""
        ...

    @abstractmethod
    def create_hosted_instance(
        self, location: Point3D, type_handle: Any, host_wall: Any, level: LevelInfo
    ) -> Any:
        """Insert a wall-hosted family instance (door or window)."""
        ...

    @abstractmethod
    def set_sill_height(self, instance: Any, sill_height: float) -> None:
        """Set the sill height of a window instance, in internal units."""
        ...

    @abstractmethod
    def create_extrusion_roof(
        self,
        profile: GableProfile,
        extrusion: RoofExtrusion,
        level: LevelInfo,
        roof_type: Any,
    ) -> Any:
        """Extrude the gable ``profile`` between the ``extrusion`` extents."""
        ...
