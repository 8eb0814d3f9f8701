"""
ModelBuilder - Material/Section Registry and Element Factory
============================================================

Elements refer to materials and sections by tag. The builder keeps them in
typed registries, checks that each object provides the capability interface
a pipe element needs, and creates the elements with validated arguments.

Typical Usage:
    >>> builder = ModelBuilder(Domain(ndm=3))
    >>> builder.add_node(1, [1.0, 0.0, 0.0])
    >>> builder.add_node(2, [0.0, 1.0, 0.0])
    >>> builder.add_material(PipeMaterial.elastic(1, 200e9, 0.3, 1.2e-5))
    >>> builder.add_section(PipeSection(1, d_out=0.3, t=0.01))
    >>> pipe = builder.curved_pipe(1, 1, 2, 1, 1, center=[0, 0, 0], pressure=2e6)
"""

import logging

from PipeCore.Objects.ConstitutiveLaw.Material import ElasticMaterialProperties
from PipeCore.Objects.FEM.CurvedPipe import CurvedPipe
from PipeCore.Objects.FEM.PipeFlexibility import CurvedPipeConstants
from PipeCore.Objects.Section.PipeSection import CrossSectionProperties
from PipeCore.Structures.Domain import Domain, Node3D

logger = logging.getLogger(__name__)


class ModelBuilder:
    """
    Registry of materials and sections, and factory of pipe elements.

    Attributes
    ----------
    domain : Domain
        Domain receiving nodes and elements
    materials : dict
        Registered materials by tag
    sections : dict
        Registered sections by tag
    """

    def __init__(self, domain=None):
        self.domain = domain if domain is not None else Domain(ndm=3)
        self.materials = {}
        self.sections = {}

    def add_node(self, tag, coords):
        node = Node3D(tag, coords)
        self.domain.add_node(node)
        return node

    def add_material(self, material):
        if not isinstance(material, ElasticMaterialProperties):
            raise TypeError(f"Material {getattr(material, 'tag', None)} is not a pipe material")
        if material.tag in self.materials:
            raise ValueError(f"Material {material.tag} already exists")
        self.materials[material.tag] = material
        return material

    def add_section(self, section):
        if not isinstance(section, CrossSectionProperties):
            raise TypeError(f"Section {getattr(section, 'tag', None)} is not a pipe section")
        if section.tag in self.sections:
            raise ValueError(f"Section {section.tag} already exists")
        self.sections[section.tag] = section
        return section

    def get_material(self, tag):
        try:
            return self.materials[tag]
        except KeyError:
            raise KeyError(f"Material {tag} is not found or not a pipe material") from None

    def get_section(self, tag):
        try:
            return self.sections[tag]
        except KeyError:
            raise KeyError(f"Section {tag} is not found or not a pipe section") from None

    def curved_pipe(self, tag, nd1, nd2, mat_tag, sec_tag, center, T0=0.0, pressure=0.0,
                    tol_wall=CurvedPipeConstants.DEFAULT_TOL_WALL, c_mass=False, add_to_domain=True):
        """
        Create a CurvedPipe element and, by default, bind it to the domain.

        Parameters
        ----------
        tag : int
            Element identifier
        nd1, nd2 : int
            End node tags
        mat_tag : int
            Material tag
        sec_tag : int
            Section tag
        center : array-like
            Arc center (3,)
        T0 : float
            Initial axial force
        pressure : float
            Internal pressure
        tol_wall : float
            Radius tolerance as a fraction of wall thickness (0 to 1)
        c_mass : bool
            Consistent mass flag
        add_to_domain : bool
            Add the element to the domain (which binds it)

        Returns
        -------
        CurvedPipe
            The new element

        Raises
        ------
        KeyError
            Unknown material or section tag
        ValueError
            Malformed arguments
        """
        sect = self.get_section(sec_tag)
        mat = self.get_material(mat_tag)

        element = CurvedPipe(tag, nd1, nd2, mat, sect, center, T0=float(T0), pressure=float(pressure),
                             c_mass=c_mass, tol_wall=float(tol_wall))

        if add_to_domain:
            status = self.domain.add_element(element)
            if status < 0:
                logger.warning("CurvedPipe %s added but its geometry could not be resolved", tag)

        return element
