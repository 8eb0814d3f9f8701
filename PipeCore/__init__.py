"""
PipeCore - Curved Pipe Element Mechanics

A Python library for the element-level mechanics of 3-D piping models:
- Curved pipe (bend) element from a force-based formulation integrated
  along the arc
- Uniform member loads, temperature rise and internal pressure (ovalization)
- Linear coordinate transformation between the basic system and global DOFs

Main Components
---------------
Structures : Model containers
    - Domain: node registry, binds elements
    - Node3D: 3-D node with 6 DOFs
    - ModelBuilder: material/section registries, element factory

Objects : Elements, materials and sections (import from PipeCore.Objects)
    - FEM: CurvedPipe, BeamElement3D, PipeFlexibility, LinearTransform3D
    - ConstitutiveLaw: PipeMaterial
    - Section: PipeSection

Quick Start
-----------
>>> from PipeCore import ModelBuilder
>>> from PipeCore.Objects import PipeMaterial, PipeSection
>>>
>>> builder = ModelBuilder()
>>> builder.add_node(1, [1.0, 0.0, 0.0])
>>> builder.add_node(2, [0.0, 1.0, 0.0])
>>> builder.add_material(PipeMaterial.elastic(1, E=200e9, nu=0.3, alpha=1.2e-5))
>>> builder.add_section(PipeSection(1, d_out=0.3, t=0.01))
>>> bend = builder.curved_pipe(1, 1, 2, 1, 1, center=[0.0, 0.0, 0.0])
>>> K = bend.get_tangent_stiff()
"""

__version__ = '1.0.0'

from PipeCore import Objects

from PipeCore.Objects.FEM import GeometryWarning, ModelError, NumericalWarning
from PipeCore.Structures import Domain, ModelBuilder, Node3D

__all__ = [
    '__version__',

    # Structures
    'Domain',
    'Node3D',
    'ModelBuilder',

    # Exceptions and warnings
    'ModelError',
    'GeometryWarning',
    'NumericalWarning',

    # Objects (subpackage)
    'Objects',
]
