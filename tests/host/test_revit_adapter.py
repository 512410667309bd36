# File: tests/host/test_revit_adapter.py

"""Tests for the host adapter contract outside of Revit."""

import pytest

from building_shell_generator.host import HostAdapter, LevelInfo
from building_shell_generator.host import revit_adapter


class TestRevitAdapterOutsideRevit:
    """The Revit adapter must refuse to run without the Revit API."""

    def test_revit_not_available(self):
        assert revit_adapter.REVIT_AVAILABLE is False
        assert revit_adapter.REVIT_ERROR

    def test_constructor_raises(self):
        with pytest.raises(RuntimeError):
            revit_adapter.RevitHostAdapter(doc=object())

    def test_category_map_empty(self):
        assert revit_adapter.CATEGORY_MAP == {}


class TestHostAdapterContract:
    """Tests for the abstract adapter and the fake used in command tests."""

    def test_cannot_instantiate_abstract_adapter(self):
        with pytest.raises(TypeError):
            HostAdapter()

    def test_level_info_is_immutable(self):
        level = LevelInfo(handle=1, name="Level 1", elevation=0.0)
        with pytest.raises(AttributeError):
            level.elevation = 3.0

    def test_fake_transaction_commits(self, fake_host):
        with fake_host.transaction("t"):
            fake_host.create_wall(None, "wall_type", None)
        assert fake_host.transactions == [("t", "started"), ("t", "committed")]

    def test_fake_transaction_rolls_back(self, fake_host):
        with pytest.raises(ValueError):
            with fake_host.transaction("t"):
                raise ValueError("stop")
        assert fake_host.transactions[-1] == ("t", "rolled_back")
