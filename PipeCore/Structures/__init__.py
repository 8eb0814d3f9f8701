"""
PipeCore Structure Classes

Domain : Node registry and element binding
    - Node3D: node with 6 DOFs [ux, uy, uz, rx, ry, rz]

ModelBuilder : Material/section registries and element factory
"""

from .Domain import Domain, Node3D
from .ModelBuilder import ModelBuilder

__all__ = [
    'Domain',
    'Node3D',
    'ModelBuilder',
]
