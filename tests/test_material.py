import dataclasses

import pytest

from cgengine.material import Material


def test_defaults():
    material = Material()
    assert material.diffuse == (1.0, 1.0, 1.0)
    assert material.ambient == (0.2, 0.2, 0.2)
    assert material.specular == (0.0, 0.0, 0.0)
    assert material.emissive == (0.0, 0.0, 0.0)
    assert material.shininess == 0.0


def test_custom_values_are_floats():
    material = Material(diffuse=[1, 0, 0], specular=(1, 1, 1), shininess=32)
    assert material.diffuse == (1.0, 0.0, 0.0)
    assert material.specular == (1.0, 1.0, 1.0)
    assert material.shininess == 32.0
    assert isinstance(material.shininess, float)


def test_equality():
    assert Material(ambient=(0.1, 0.1, 0.1)) == Material(ambient=[0.1, 0.1, 0.1])
    assert Material(ambient=(0.1, 0.1, 0.1)) != Material()


@pytest.mark.parametrize("name", ["diffuse", "ambient", "specular", "emissive"])
def test_wrong_component_count(name):
    with pytest.raises(ValueError):
        Material(**{name: (1.0, 1.0)})


def test_frozen():
    material = Material(shininess=8.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        material.shininess = 5.0
    assert material.shininess == 8.0