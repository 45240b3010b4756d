"""
Tests for models module.
"""

import dataclasses
from datetime import datetime, timezone

import pytest


class TestBuildDescriptor:
    """Tests for BuildDescriptor dataclass."""

    def test_create_build(self):
        """Test basic BuildDescriptor creation."""
        from buildwatch.models.build import BuildDescriptor

        build = BuildDescriptor(branch="beta", build_id=123, timestamp=1700000000, description="Hotfix")

        assert build.branch == "beta"
        assert build.build_id == 123
        assert build.timestamp == 1700000000
        assert build.description == "Hotfix"

    def test_default_description(self):
        """Test description falls back to the placeholder text."""
        from buildwatch.models.build import BuildDescriptor, DEFAULT_DESCRIPTION

        build = BuildDescriptor(branch="public", build_id=1, timestamp=0)

        assert build.description == DEFAULT_DESCRIPTION == "No description"

    def test_is_immutable(self, make_build):
        """Test that fields cannot be reassigned."""
        build = make_build(100)

        with pytest.raises(dataclasses.FrozenInstanceError):
            build.build_id = 101

    def test_placeholder(self):
        """Test placeholder descriptor values."""
        from buildwatch.models.build import BuildDescriptor

        placeholder = BuildDescriptor.placeholder()

        assert placeholder.branch == "none"
        assert placeholder.build_id == 0
        assert placeholder.timestamp == 0
        assert placeholder.description == "No description"

    def test_render(self, make_build):
        """Test single-line rendering."""
        build = make_build(101, timestamp=1700000123, description="Patch 1.2")

        assert build.render() == (
            "Branch: public; Build ID: 101; Timestamp: 1700000123; Description: Patch 1.2"
        )
        assert str(build) == build.render()

    def test_published_at(self, make_build):
        """Test timestamp conversion to UTC datetime."""
        build = make_build(1, timestamp=0)

        assert build.published_at == datetime(1970, 1, 1, tzinfo=timezone.utc)
