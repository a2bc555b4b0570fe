"""Shader sources and the light data uploaded to the shaded program."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from cgengine.lights import DirectionalLight, Light, PointLight, Spotlight

Vector3 = tuple[float, float, float]

_VERSION = "#version 460 core"

SHADED_VERTEX_SHADER = f"""{_VERSION}
layout (location = 0) in vec4 inPosition;
layout (location = 1) in vec2 inTextureCoordinate;
layout (location = 2) in vec3 inNormal;

layout (location = 0) out vec2 outTextureCoordinate;
layout (location = 1) out vec3 outNormal;
layout (location = 2) out vec3 outFragmentPosition;

uniform mat4 uniFullMatrix;
uniform mat4 uniWorldMatrix;
uniform mat4 uniNormalMatrix;

void main() {{
    vec4 world = uniWorldMatrix * inPosition;
    outFragmentPosition = world.xyz;
    outNormal = normalize(mat3(uniNormalMatrix) * inNormal);
    outTextureCoordinate = inTextureCoordinate;
    gl_Position = uniFullMatrix * inPosition;
}}
"""

SOLID_COLOR_VERTEX_SHADER = f"""{_VERSION}
layout (location = 0) in vec4 inPosition;
uniform mat4 uniFullMatrix;
void main() {{ gl_Position = uniFullMatrix * inPosition; }}
"""

SOLID_COLOR_FRAGMENT_SHADER = f"""{_VERSION}
layout (location = 0) out vec4 outColor;
uniform vec4 uniColor;
void main() {{ outColor = uniColor; }}
"""

_FRAGMENT_PRELUDE = """
layout (location = 0) in vec2 inTextureCoordinate;
layout (location = 1) in vec3 inNormal;
layout (location = 2) in vec3 inFragmentPosition;
layout (location = 0) out vec4 outColor;

uniform vec3 uniCameraPosition;
uniform bool uniTextured;
uniform sampler2D uniSampler;
uniform vec3 uniDiffuse;
uniform vec3 uniAmbient;
uniform vec3 uniSpecular;
uniform vec3 uniEmissive;
uniform float uniShininess;

struct Shade {
    vec3 diffuse;
    vec3 highlight;
};

void addLight(inout Shade acc, vec3 n, vec3 l, vec3 v) {
    float lambert = max(dot(n, l), 0.0);
    acc.diffuse += lambert * uniDiffuse;
    if (lambert > 0.0 && uniShininess > 0.0) {
        float phong = max(dot(v, reflect(-l, n)), 0.0);
        acc.highlight += uniSpecular * pow(phong, uniShininess);
    }
}
"""

# (count macro, uniform declarations, loop body) for each kind of light.
_LIGHT_SECTIONS = (
    (
        "NUM_POINT_LIGHTS",
        ("uniform vec3 uniPointPositions[NUM_POINT_LIGHTS];",),
        "addLight(acc, n, normalize(uniPointPositions[i] - inFragmentPosition), v);",
    ),
    (
        "NUM_DIRECTIONAL_LIGHTS",
        ("uniform vec3 uniDirectionalDirections[NUM_DIRECTIONAL_LIGHTS];",),
        "addLight(acc, n, uniDirectionalDirections[i], v);",
    ),
    (
        "NUM_SPOTLIGHTS",
        (
            "uniform vec3 uniSpotPositions[NUM_SPOTLIGHTS];",
            "uniform vec3 uniSpotDirections[NUM_SPOTLIGHTS];",
            "uniform float uniSpotCutoffs[NUM_SPOTLIGHTS];",
        ),
        "vec3 l = normalize(uniSpotPositions[i] - inFragmentPosition);\n"
        "        if (max(dot(l, -uniSpotDirections[i]), 0.0) > uniSpotCutoffs[i]) {\n"
        "            addLight(acc, n, l, v);\n"
        "        }",
    ),
)


def _guarded(macro: str, text: str) -> str:
    return f"#if {macro} > 0\n{text}\n#endif\n"


def _fragment_body() -> str:
    declarations = "".join(
        _guarded(macro, "\n".join(uniforms)) for macro, uniforms, _ in _LIGHT_SECTIONS
    )
    loops = "".join(
        _guarded(
            macro,
            f"    for (int i = 0; i < {macro}; ++i) {{\n        {body}\n    }}",
        )
        for macro, _, body in _LIGHT_SECTIONS
    )
    main = (
        "void main() {\n"
        "    vec3 n = normalize(inNormal);\n"
        "    vec3 v = normalize(uniCameraPosition - inFragmentPosition);\n"
        "    Shade acc = Shade(vec3(0.0), vec3(0.0));\n"
        f"{loops}"
        "    vec3 base = acc.diffuse + uniAmbient + uniEmissive;\n"
        "    if (uniTextured) {\n"
        "        base *= texture(uniSampler, inTextureCoordinate).rgb;\n"
        "    }\n"
        "    outColor = vec4(base + acc.highlight, 1.0);\n"
        "}\n"
    )
    return _FRAGMENT_PRELUDE + "\n" + declarations + "\n" + main


_SHADED_FRAGMENT_BODY = _fragment_body()


def fragment_shader_source(point_lights: int, directional_lights: int, spotlights: int) -> str:
    """Fragment shader of the shaded program, sized for the given light counts."""
    counts = {
        "point_lights": point_lights,
        "directional_lights": directional_lights,
        "spotlights": spotlights,
    }
    for name, count in counts.items():
        if count < 0:
            raise ValueError(f"{name} must not be negative, got {count}")
    header = "\n".join(
        [
            _VERSION,
            f"#define NUM_DIRECTIONAL_LIGHTS {directional_lights}",
            f"#define NUM_POINT_LIGHTS {point_lights}",
            f"#define NUM_SPOTLIGHTS {spotlights}",
        ]
    )
    return header + "\n" + _SHADED_FRAGMENT_BODY


@dataclass
class LightUniforms:
    """Values for the light arrays of the shaded fragment shader."""

    point_positions: list[Vector3] = field(default_factory=list)
    directional_directions: list[Vector3] = field(default_factory=list)
    spot_positions: list[Vector3] = field(default_factory=list)
    spot_directions: list[Vector3] = field(default_factory=list)
    spot_cutoffs: list[float] = field(default_factory=list)


def light_uniforms(
    lights: Iterable[Light],
    point_lights: int,
    directional_lights: int,
    spotlights: int,
) -> LightUniforms:
    """Gather light data; the counts must match those the shader was built for."""
    uniforms = LightUniforms()
    for light in lights:
        if isinstance(light, PointLight):
            uniforms.point_positions.append(light.position)
        elif isinstance(light, DirectionalLight):
            uniforms.directional_directions.append(light.direction)
        elif isinstance(light, Spotlight):
            uniforms.spot_positions.append(light.position)
            uniforms.spot_directions.append(light.direction)
            uniforms.spot_cutoffs.append(math.cos(light.cutoff))

    if (
        len(uniforms.point_positions) != point_lights
        or len(uniforms.directional_directions) != directional_lights
        or len(uniforms.spot_positions) != spotlights
    ):
        raise ValueError("shaded shader program got wrong number of lights")
    return uniforms