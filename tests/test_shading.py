import math

import pytest

from cgengine.lights import DirectionalLight, PointLight, Spotlight
from cgengine.shading import (
    LightUniforms,
    fragment_shader_source,
    light_uniforms,
)


def test_fragment_shader_header_defines_counts():
    source = fragment_shader_source(2, 1, 3)
    lines = source.splitlines()
    assert lines[0] == "#version 460 core"
    assert lines[1] == "#define NUM_DIRECTIONAL_LIGHTS 1"
    assert lines[2] == "#define NUM_POINT_LIGHTS 2"
    assert lines[3] == "#define NUM_SPOTLIGHTS 3"
    assert "uniform float uniSpotCutoffs[NUM_SPOTLIGHTS];" in source


def test_fragment_shader_rejects_negative_counts():
    with pytest.raises(ValueError):
        fragment_shader_source(-1, 0, 0)


def test_fragment_shader_without_lights_guards_light_arrays():
    source = fragment_shader_source(0, 0, 0)
    lines = source.splitlines()
    assert "#define NUM_POINT_LIGHTS 0" in lines
    assert "#define NUM_DIRECTIONAL_LIGHTS 0" in lines
    assert "#define NUM_SPOTLIGHTS 0" in lines
    assert "#if NUM_POINT_LIGHTS > 0" in lines
    assert "#if NUM_DIRECTIONAL_LIGHTS > 0" in lines
    assert "#if NUM_SPOTLIGHTS > 0" in lines


def test_light_uniforms_sorts_lights_by_kind():
    lights = [
        PointLight((1.0, 2.0, 3.0)),
        DirectionalLight((0.0, 0.0, 5.0)),
        Spotlight((4.0, 5.0, 6.0), (0.0, -2.0, 0.0), 0.0),
        PointLight((7.0, 8.0, 9.0)),
    ]
    uniforms = light_uniforms(lights, 2, 1, 1)
    assert uniforms.point_positions == [(1.0, 2.0, 3.0), (7.0, 8.0, 9.0)]
    assert uniforms.directional_directions == [(0.0, 0.0, 1.0)]
    assert uniforms.spot_positions == [(4.0, 5.0, 6.0)]
    assert uniforms.spot_directions == [(0.0, -1.0, 0.0)]
    assert uniforms.spot_cutoffs == [pytest.approx(1.0)]


def test_spot_cutoff_is_cosine_of_angle():
    spot = Spotlight((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), math.pi / 2)
    uniforms = light_uniforms([spot], 0, 0, 1)
    assert uniforms.spot_cutoffs[0] == pytest.approx(0.0, abs=1e-12)


def test_no_lights_gives_empty_uniforms():
    assert light_uniforms([], 0, 0, 0) == LightUniforms()


def test_wrong_light_count_raises():
    with pytest.raises(ValueError, match="wrong number of lights"):
        light_uniforms([PointLight((0.0, 0.0, 0.0))], 0, 0, 0)
    with pytest.raises(ValueError):
        light_uniforms([], 0, 1, 0)