"""Light sources.

Two kinds of light are supported:
- PointLight: positioned light contributing diffuse and specular terms
- AmbientLight: scene-wide constant term, exactly one per world

Lights only exist on the host; the World copies them into Taichi fields.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PointLight:
    """A point light.

    Attributes:
        intensity: Light intensity (>= 0).
        position: Position of the light in world space.

    Raises:
        ValueError: If the intensity is negative.
    """

    intensity: float
    position: tuple[float, float, float]

    def __post_init__(self) -> None:
        if self.intensity < 0.0:
            raise ValueError(f"Point light intensity = {self.intensity} is negative.")


@dataclass(frozen=True)
class AmbientLight:
    """Scene-wide ambient light.

    Attributes:
        intensity: Light intensity (>= 0).

    Raises:
        ValueError: If the intensity is negative.
    """

    intensity: float = 0.0

    def __post_init__(self) -> None:
        if self.intensity < 0.0:
            raise ValueError(f"Ambient light intensity = {self.intensity} is negative.")
