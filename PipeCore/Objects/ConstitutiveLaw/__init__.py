"""
ConstitutiveLaw Constitutive Models

Materials
---------
ElasticMaterialProperties : Capability interface used by pipe elements
PipeMaterial : Temperature-dependent linear elastic pipe material
"""

from .Material import ElasticMaterialProperties, PipeMaterial

__all__ = [
    'ElasticMaterialProperties',
    'PipeMaterial',
]
