"""
PipeCore Objects

Finite elements, materials and sections.

Subpackages
-----------
FEM : Pipe finite elements
    - CurvedPipe: circular pipe bend (force-based)
    - BeamElement3D: 3-D beam element base
    - LinearTransform3D: basic <-> global transformation

ConstitutiveLaw : Materials
    - PipeMaterial: temperature-dependent elastic material

Section : Cross-sections
    - PipeSection: circular hollow section

Usage
-----
>>> from PipeCore.Objects import CurvedPipe, PipeMaterial, PipeSection
"""

from PipeCore.Objects import FEM
from PipeCore.Objects import ConstitutiveLaw
from PipeCore.Objects import Section
from PipeCore.Objects.ConstitutiveLaw import ElasticMaterialProperties, PipeMaterial
from PipeCore.Objects.FEM import (
    BaseFE,
    BeamElement3D,
    BeamThermalLoad,
    BeamUniformLoad,
    CurvedPipe,
    LinearTransform3D,
    PipeFlexibility,
)
from PipeCore.Objects.Section import CrossSectionProperties, PipeSection

__all__ = [
    # Subpackages
    'FEM',
    'ConstitutiveLaw',
    'Section',

    # Elements
    'BaseFE',
    'BeamElement3D',
    'CurvedPipe',
    'PipeFlexibility',
    'LinearTransform3D',

    # Loads
    'BeamUniformLoad',
    'BeamThermalLoad',

    # Materials and sections
    'ElasticMaterialProperties',
    'PipeMaterial',
    'CrossSectionProperties',
    'PipeSection',
]
