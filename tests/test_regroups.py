"""Tests for regrouping documents under a size cap."""

import itertools

import pytest

from textmagnet.exceptions import InvalidInputError, ItemTypeError
from textmagnet.grouping import Group, Groups, regroup, regroups
from textmagnet.models import Document, Word

PREFIXES = ["Spot", "Point", "Area", "Box", "Sphere"]
SUFFIXES = ["Light", "Shape", "Node", "Camera", "Mesh", "Filter", "Texture", "Buffer", "Sound"]


@pytest.fixture
def scene_group(make_docs):
    """45 scene type documents."""
    names = [f"scene.{p}{s}" for p, s in itertools.product(PREFIXES, SUFFIXES)]
    return Group(make_docs(*names))


class TestRegroups:
    """Tests for capped regrouping."""

    def test_every_group_under_cap(self, scene_group):
        result = regroups(scene_group, 20)

        assert all(len(g) < 20 for g in result)

    def test_no_loss_or_duplication(self, scene_group):
        result = regroups(scene_group, 20)

        items = result.items()
        assert len(items) == len(scene_group)
        assert set(items) == set(scene_group)

    def test_small_cap_still_holds(self, scene_group):
        result = regroups(scene_group, 3)

        assert all(len(g) < 3 for g in result)
        assert sorted(str(d) for d in result.items()) == sorted(str(d) for d in scene_group)

    def test_small_group_returned_as_is(self, make_docs):
        group = Group(make_docs("a.Box", "a.Car"))
        result = regroups(group, 20)

        assert len(result) == 1
        assert result[0] is group

    def test_repeated_document_kept(self, make_docs):
        """A document added twice survives capped regrouping twice."""
        shape_box, box, camera = make_docs("geo.ShapeBox", "geo.Box", "geo.Camera")
        group = Group([shape_box, box, camera, box])

        result = regroups(group, 2)

        assert all(len(g) < 2 for g in result)
        assert sorted(d.short_name for d in result.items()) == ["Box", "Box", "Camera", "ShapeBox"]

    def test_cap_too_small(self, scene_group):
        with pytest.raises(InvalidInputError):
            regroups(scene_group, 1)


class TestRegroup:
    """Tests for single-step regrouping."""

    def test_regroup_by_suffix(self, make_docs):
        group = Group(make_docs("scene.SpotLight", "scene.PointLight", "scene.Camera"))
        result = regroup(group)

        assert isinstance(result, Groups)
        assert len(result) == 2

    def test_regroup_keeps_repeats_together(self, make_docs):
        shape_box, box = make_docs("geo.ShapeBox", "geo.Box")
        result = regroup(Group([shape_box, box, box]))

        assert len(result) == 1
        assert result[0].items == [shape_box, box, box]

    def test_regroup_requires_documents(self):
        with pytest.raises(ItemTypeError):
            regroup(Group([Word("sort")]))

    def test_merge_groups(self, make_docs):
        a, b, c = make_docs("x.A", "x.B", "x.C")
        merged = Group.merge([Group([a, b]), Group([c])], Document)
        assert merged.items == [a, b, c]
