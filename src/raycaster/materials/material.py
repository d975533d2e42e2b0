"""Phong-style surface material.

A material carries a base color, a specular exponent and a reflectivity.
Each primitive stores its own copy of the material, and every hit record
carries a further copy, so there is no material registry or ID lookup.

The specular exponent uses the sentinel ``SPECULAR_DISABLED`` (-1) to turn
the highlight term off entirely. Reflectivity is kept in the data model but
is not consumed by shading; there is no recursive bounce.

Example:
    >>> from src.raycaster.materials.material import MaterialInfo
    >>> shiny_red = MaterialInfo(color=(0.8, 0.5, 0.5), specular=500.0, reflectivity=0.2)
    >>> matte = MaterialInfo(color=(0.3, 0.4, 0.4))
    >>> matte.specular
    -1.0
"""

from dataclasses import dataclass

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3

# Specular exponent value that disables the highlight term
SPECULAR_DISABLED = -1.0


@ti.dataclass
class Material:
    """Device-side material copied into primitives and hit records.

    Attributes:
        color: Base color (RGB), each component in [0, 1].
        specular: Specular exponent, or -1 to disable the specular term.
        reflectivity: Reflectivity in [0, 1] (not used by shading).
    """

    color: vec3
    specular: ti.f32
    reflectivity: ti.f32


@dataclass(frozen=True)
class MaterialInfo:
    """Host-side description of a material.

    Attributes:
        color: Base color as (R, G, B), each component in [0, 1].
        specular: Specular exponent (>= 0), or SPECULAR_DISABLED.
        reflectivity: Reflectivity in [0, 1].

    Raises:
        ValueError: If any attribute is out of range.
    """

    color: tuple[float, float, float]
    specular: float = SPECULAR_DISABLED
    reflectivity: float = 0.0

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError(f"Material color must have 3 components, got {len(self.color)}")
        for i, component in enumerate(self.color):
            if component < 0.0 or component > 1.0:
                raise ValueError(f"Color component {i} = {component} is outside [0, 1].")
        if self.specular != SPECULAR_DISABLED and self.specular < 0.0:
            raise ValueError(
                f"Specular exponent = {self.specular} is negative. "
                f"Use {SPECULAR_DISABLED} to disable the specular term."
            )
        if self.reflectivity < 0.0 or self.reflectivity > 1.0:
            raise ValueError(f"Reflectivity = {self.reflectivity} is outside [0, 1].")

    @property
    def has_specular(self) -> bool:
        """Whether the specular term is evaluated for this material."""
        return self.specular != SPECULAR_DISABLED
