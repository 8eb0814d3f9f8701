"""
Cross-Sections

Sections
--------
CrossSectionProperties : Capability interface used by pipe elements
PipeSection : Circular hollow section
"""

from .PipeSection import CrossSectionProperties, PipeSection

__all__ = [
    'CrossSectionProperties',
    'PipeSection',
]
