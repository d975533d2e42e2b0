"""Pytest configuration for ray caster tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def matte_material():
    """A material with the specular term disabled."""
    from src.raycaster.materials.material import MaterialInfo

    return MaterialInfo(color=(0.8, 0.5, 0.5))


@pytest.fixture
def shiny_material():
    """A material with a specular exponent of 10."""
    from src.raycaster.materials.material import MaterialInfo

    return MaterialInfo(color=(0.6, 0.2, 0.2), specular=10.0, reflectivity=0.3)
