"""
Pipe Finite Element (FEM) Module

This module provides the 3-D pipe elements and their numerical building blocks:
- Element contract and the exceptions/warnings raised by elements
- Gauss-Legendre integration along circular arcs
- Linear 3-D coordinate transformation (basic <-> global)
- 3-D beam element base (load state, mass, force assembly)
- Curved pipe (bend) element with its flexibility formulation

Elements
--------
BaseFE : Abstract base class for all finite elements

BeamElement3D : 2-node 3-D beam base, 6 DOFs per node
    - CurvedPipe: circular pipe bend, force-based formulation

Formulation
-----------
PipeFlexibility : Basic flexibility of a pipe bend
    - bx: basic forces -> stress resultants along the arc
    - fs: section flexibility
    - spx / plw: uniform member loads
    - thermal and internal pressure corrections

Loads
-----
BeamUniformLoad : Uniform member load (wy, wz, wx)
BeamThermalLoad : Temperature change over the section

Usage
-----
>>> from PipeCore.Objects.FEM import CurvedPipe
>>> from PipeCore.Objects.ConstitutiveLaw import PipeMaterial
>>> from PipeCore.Objects.Section import PipeSection
>>>
>>> mat = PipeMaterial.elastic(1, E=200e9, nu=0.3, alpha=1.2e-5)
>>> sect = PipeSection(1, d_out=0.3, t=0.01)
>>> bend = CurvedPipe(1, 1, 2, mat, sect, center=[0.0, 0.0, 0.0])
"""

from .BaseFE import BaseFE, GeometryWarning, ModelError, NumericalWarning
from .BeamElement3D import BeamElement3D, BeamThermalLoad, BeamUniformLoad, ElementState
from .CurvedPipe import CurvedPipe
from .GaussLegendre import GAUSS_20, arc_points, gauss_points_20, integrate_arc
from .PipeFlexibility import CurvedPipeConstants, PipeFlexibility, PipeProperties
from .Transformation import LinearTransform3D

__all__ = [
    # Base classes
    'BaseFE',
    'BeamElement3D',
    'ElementState',

    # Elements
    'CurvedPipe',

    # Formulation
    'PipeFlexibility',
    'PipeProperties',
    'CurvedPipeConstants',
    'LinearTransform3D',

    # Quadrature
    'GAUSS_20',
    'gauss_points_20',
    'arc_points',
    'integrate_arc',

    # Loads
    'BeamUniformLoad',
    'BeamThermalLoad',

    # Exceptions and warnings
    'ModelError',
    'GeometryWarning',
    'NumericalWarning',
]
