"""Materials module.

A single Phong-style material model is supported: base color, specular
exponent (or -1 for none) and reflectivity. Shading only reads the red
channel of the base color, so renders are grayscale.
"""

from .material import SPECULAR_DISABLED, Material, MaterialInfo

__all__ = [
    "Material",
    "MaterialInfo",
    "SPECULAR_DISABLED",
]
