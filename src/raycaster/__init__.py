"""Taichi-based ray caster with local Phong-style lighting.

This package renders a single still image of spheres and planes lit by
point lights and an ambient term, with one primary ray per pixel:
- Ray-sphere and ray-plane intersection with closest-hit resolution
- Ambient + diffuse + specular shading (no shadows, no reflections)
- 8-bit grayscale output written through Pillow

Subpackages:
    core: Vector utilities, shading and the render loop
    camera: Pixel-to-viewport projection
    geometry: Shape primitives and intersection routines
    materials: Surface material model
    scene: Lights, world storage and the default scene
    preview: Frame buffer and image export
"""

__version__ = "0.1.0"
