# tests/conftest.py
import sys
import os

# Add src directory and project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

from building_shell_generator.host.adapter import HostAdapter, LevelInfo


class FakeHostAdapter(HostAdapter):
    """In-memory HostAdapter that records every call.

    Handles are plain strings. ``fail_on`` names an adapter method that
    raises RuntimeError when called, to exercise rollback.
    """

    def __init__(
        self,
        levels: Optional[Dict[str, float]] = None,
        family_types: Optional[Dict[Tuple[str, str, str], str]] = None,
        wall_thickness: float = 0.5,
        roof_thickness: float = 1.0,
        fail_on: Optional[str] = None,
    ):
        self.levels = levels if levels is not None else {"Level 1": 0.0, "Level 2": 10.0}
        self.family_types = family_types if family_types is not None else {
            ("OST_Doors", "0915 x 2134mm", "M_Single-Flush"): "door_type",
            ("OST_Windows", "0915 x 1830mm", "M_Fixed"): "window_type",
            ("OST_Roofs", "Generic - 400mm", "Basic Roof"): "roof_type",
        }
        self.thicknesses = {"wall_type": wall_thickness, "roof_type": roof_thickness}
        self.fail_on = fail_on
        self.calls: List[Tuple[str, tuple]] = []
        self.transactions: List[Tuple[str, str]] = []
        self.in_transaction = False

    @property
    def host_name(self) -> str:
        return "Fake"

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name == self.fail_on:
            raise RuntimeError(f"{name} failed")

    def calls_named(self, name: str) -> List[tuple]:
        return [args for call, args in self.calls if call == name]

    def find_level(self, name):
        self._record("find_level", name)
        if name not in self.levels:
            return None
        return LevelInfo(handle=f"level:{name}", name=name, elevation=self.levels[name])

    def resolve_family_type(self, category, type_name, family_name):
        self._record("resolve_family_type", category, type_name, family_name)
        return self.family_types.get((category, type_name, family_name))

    def default_wall_type(self):
        self._record("default_wall_type")
        return "wall_type"

    def type_thickness(self, type_handle):
        self._record("type_thickness", type_handle)
        return self.thicknesses[type_handle]

    @contextmanager
    def transaction(self, name):
        self.transactions.append((name, "started"))
        self.in_transaction = True
        try:
            yield
        except Exception:
            self.transactions.append((name, "rolled_back"))
            raise
        else:
            self.transactions.append((name, "committed"))
        finally:
            self.in_transaction = False

    def _mutate(self, name: str, *args: Any) -> None:
        assert self.in_transaction, f"{name} called outside a transaction"
        self._record(name, *args)

    def create_wall(self, centerline, wall_type, base_level):
        self._mutate("create_wall", centerline, wall_type, base_level)
        return f"wall:{len(self.calls_named('create_wall')) - 1}"

    def set_wall_top_level(self, wall, top_level):
        self._mutate("set_wall_top_level", wall, top_level)

    def create_hosted_instance(self, location, type_handle, host_wall, level):
        self._mutate("create_hosted_instance", location, type_handle, host_wall, level)
        return f"{type_handle}@{host_wall}"

    def set_sill_height(self, instance, sill_height):
        self._mutate("set_sill_height", instance, sill_height)

    def create_extrusion_roof(self, profile, extrusion, level, roof_type):
        self._mutate("create_extrusion_roof", profile, extrusion, level, roof_type)
        return "roof"


@pytest.fixture
def make_host():
    """Factory for FakeHostAdapter with custom levels, types or failures."""
    return FakeHostAdapter


@pytest.fixture
def fake_host():
    """A fake host with both levels and all default family types."""
    return FakeHostAdapter()
