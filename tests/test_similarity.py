"""Tests for textmagnet.similarity module."""

import pytest

from textmagnet.similarity import (
    jaccard,
    jaccard_distance,
    lc_suffix,
    lc_suffix_score,
    normalize,
    shared_suffix,
)


class TestNormalize:
    """Tests for length normalization."""

    def test_divides_by_longer_length(self):
        assert normalize(2, "abcd", "ab") == 0.5

    def test_both_empty(self):
        """Two empty strings normalize to 0."""
        assert normalize(0, "", "") == 0.0

    def test_missing_string(self):
        with pytest.raises(TypeError):
            normalize(1, None, "a")


class TestSuffix:
    """Tests for longest common suffix."""

    def test_shared_suffix(self):
        assert shared_suffix("ShapeBox", "Box") == "Box"
        assert shared_suffix("SpotLight", "PointLight") == "tLight"

    def test_no_shared_suffix(self):
        assert shared_suffix("BoxShape", "Box") == ""
        assert lc_suffix("abc", "xyz") == 0

    def test_score(self):
        """Suffix length over the longer length."""
        assert lc_suffix_score("ShapeBox", "Box") == pytest.approx(3 / 8)
        assert lc_suffix_score("Box", "Box") == 1.0


class TestJaccard:
    """Tests for character-set Jaccard."""

    def test_known(self):
        assert jaccard("abc", "abd") == pytest.approx(0.5)
        assert jaccard_distance("abc", "abd") == pytest.approx(0.5)

    def test_disjoint(self):
        assert jaccard("abc", "xyz") == 0.0
        assert jaccard_distance("abc", "xyz") == 1.0

    def test_empty(self):
        assert jaccard("", "") == 0.0
