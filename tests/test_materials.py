"""Tests for materials."""

import pytest
import numpy as np
from dataclasses import FrozenInstanceError

from phongtracer.vec3 import Color
from phongtracer.materials import Material
from phongtracer.errors import ConstructionError


def make_material(**overrides):
    fields = dict(
        ambient=Color(0.1, 0.1, 0.1),
        diffuse=Color(0.5, 0.5, 0.5),
        specular=Color(1, 1, 1),
    )
    fields.update(overrides)
    return Material(**fields)


class TestMaterialCreation:
    """Test Material construction and defaults."""

    def test_defaults(self):
        m = make_material()
        assert m.shininess == 32.0
        assert m.reflectivity == 0.0
        assert not m.is_reflective

    def test_accepts_sequences(self):
        m = Material((0.1, 0.2, 0.3), [0.4, 0.5, 0.6], (1, 1, 1))
        assert m.ambient == Color(0.1, 0.2, 0.3)
        assert m.diffuse == Color(0.4, 0.5, 0.6)

    def test_reflective(self):
        m = make_material(reflectivity=0.5)
        assert m.is_reflective

    def test_immutable(self):
        m = make_material()
        with pytest.raises(FrozenInstanceError):
            m.shininess = 4.0

    def test_shared_by_identity(self):
        m = make_material()
        other = make_material()
        assert m is not other
        assert len({m, other}) == 2

    def test_numpy_colors_are_copied(self):
        diffuse = np.array([0.5, 0.5, 0.5])
        m = Material(Color(0.1, 0.1, 0.1), diffuse, Color(0, 0, 0))
        diffuse[0] = 9.0
        assert m.diffuse.r == 0.5


class TestMaterialValidation:
    """Invalid materials fail at construction."""

    @pytest.mark.parametrize("field", ["ambient", "diffuse", "specular"])
    def test_missing_color(self, field):
        with pytest.raises(ConstructionError):
            make_material(**{field: None})

    def test_negative_channel(self):
        with pytest.raises(ConstructionError, match="non-negative"):
            make_material(diffuse=Color(0.5, -0.1, 0.5))

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_reflectivity_range(self, value):
        with pytest.raises(ConstructionError, match="reflectivity"):
            make_material(reflectivity=value)

    @pytest.mark.parametrize("value", [0, -3.0])
    def test_shininess_positive(self, value):
        with pytest.raises(ConstructionError, match="shininess"):
            make_material(shininess=value)

    @pytest.mark.parametrize("field, value", [
        ("shininess", float("nan")),
        ("shininess", "shiny"),
        ("reflectivity", float("nan")),
        ("reflectivity", None),
        ("diffuse", (0.5, float("nan"), 0.5)),
        ("specular", ("a", "b", "c")),
    ])
    def test_rejects_non_numeric_or_nan(self, field, value):
        with pytest.raises(ConstructionError, match=field):
            make_material(**{field: value})

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_material(ambient=None)
