"""
Shared fixtures for PipeCore tests.

This module provides simple, reusable fixtures for testing.
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from PipeCore.Objects.ConstitutiveLaw.Material import PipeMaterial
from PipeCore.Objects.FEM.CurvedPipe import CurvedPipe
from PipeCore.Objects.Section.PipeSection import PipeSection
from PipeCore.Structures.Domain import Domain, Node3D
from PipeCore.Structures.ModelBuilder import ModelBuilder

BEND_RADIUS = 1.5


# =============================================================================
# ConstitutiveLaw Fixtures
# =============================================================================

@pytest.fixture
def steel():
    """Steel: E=200 GPa, nu=0.3, alpha=1.2e-5 1/K, temperature independent."""
    return PipeMaterial.elastic(1, E=200e9, nu=0.3, alpha=1.2e-5)


@pytest.fixture
def hot_steel():
    """Steel whose modulus halves between 0 and 100 degrees."""
    return PipeMaterial(2, [(0.0, 200e9, 0.3, 1.2e-5),
                            (100.0, 100e9, 0.3, 1.2e-5)])


# =============================================================================
# Section Fixtures
# =============================================================================

@pytest.fixture
def pipe_section():
    """300 mm pipe, 10 mm wall, rigid in shear, massless."""
    return PipeSection(1, d_out=0.3, t=0.01)


@pytest.fixture
def heavy_section():
    """Same pipe with 75 kg/m."""
    return PipeSection(2, d_out=0.3, t=0.01, rho=75.0)


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def bend_domain():
    """90 degree bend in the global x-y plane, centered at the origin."""
    dom = Domain(ndm=3)
    dom.add_node(Node3D(1, [BEND_RADIUS, 0.0, 0.0]))
    dom.add_node(Node3D(2, [0.0, BEND_RADIUS, 0.0]))
    return dom


@pytest.fixture
def bend(bend_domain, steel, pipe_section):
    """Bound 90 degree CurvedPipe."""
    pipe = CurvedPipe(1, 1, 2, steel, pipe_section, center=[0.0, 0.0, 0.0])
    bend_domain.add_element(pipe)
    return pipe


@pytest.fixture
def builder(steel, pipe_section):
    """ModelBuilder with the 90 degree bend nodes and steel pipe registered."""
    b = ModelBuilder()
    b.add_node(1, [BEND_RADIUS, 0.0, 0.0])
    b.add_node(2, [0.0, BEND_RADIUS, 0.0])
    b.add_material(steel)
    b.add_section(pipe_section)
    return b


# =============================================================================
# Helper Functions
# =============================================================================

def is_symmetric(matrix, tol=1e-10):
    """Check if matrix is symmetric, relative to its largest entry."""
    scale = max(1.0, np.abs(matrix).max())
    return np.allclose(matrix, matrix.T, rtol=tol, atol=tol * scale)


def is_positive_definite(matrix):
    """Check if matrix is positive definite."""
    eigenvalues = np.linalg.eigvalsh(matrix)
    return np.all(eigenvalues > 0)


def is_positive_semidefinite(matrix, tol=1e-10):
    """Check if matrix is positive semi-definite, relative to its largest eigenvalue."""
    eigenvalues = np.linalg.eigvalsh(matrix)
    return np.all(eigenvalues >= -tol * max(1.0, np.abs(eigenvalues).max()))


def rigid_body_modes(crds_i, crds_j):
    """
    The 6 rigid-body displacement fields of a 2-node, 6-DOF-per-node element.

    Returns
    -------
    np.ndarray
        (12, 6), translations along x, y, z then rotations about x, y, z
        through the origin
    """
    modes = np.zeros((12, 6))
    for k in range(3):
        modes[k, k] = 1.0
        modes[6 + k, k] = 1.0
    for k in range(3):
        omega = np.zeros(3)
        omega[k] = 1.0
        modes[0:3, 3 + k] = np.cross(omega, crds_i)
        modes[3:6, 3 + k] = omega
        modes[6:9, 3 + k] = np.cross(omega, crds_j)
        modes[9:12, 3 + k] = omega
    return modes
