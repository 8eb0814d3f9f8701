import logging
import warnings

import matplotlib.pyplot as plt
import numpy as np

from PipeCore.Objects.FEM.BaseFE import GeometryWarning, ModelError, NumericalWarning
from PipeCore.Objects.FEM.BeamElement3D import BeamElement3D, ElementState
from PipeCore.Objects.FEM.PipeFlexibility import CurvedPipeConstants, PipeFlexibility, PipeProperties
from PipeCore.Objects.FEM.Transformation import LinearTransform3D

logger = logging.getLogger(__name__)


class CurvedPipe(BeamElement3D):
    """
    Circular pipe bend between two nodes.

    The bend lies in the plane through both nodes and the arc center. Its
    stiffness comes from the force-based formulation in PipeFlexibility,
    including uniform member loads, a uniform temperature rise and internal
    pressure (ovalization of the bend).

    Geometry (radius, half angle, local frame) is derived when the element is
    bound to a domain, and derived again on every new binding.

    Parameters
    ----------
    tag : int
        Element identifier
    nd1, nd2 : int
        End node tags
    mat : ElasticMaterialProperties
        Pipe material
    sect : CrossSectionProperties
        Pipe section
    center : array-like
        Arc center (3,)
    T0 : float
        Initial axial force
    pressure : float
        Internal pressure
    c_mass : bool
        Consistent (True) or lumped (False) mass
    tol_wall : float
        Allowed difference of the two node-to-center distances, as a
        fraction of the wall thickness (0 to 1)
    """

    def __init__(self, tag, nd1, nd2, mat, sect, center, T0=0.0, pressure=0.0, c_mass=False,
                 tol_wall=CurvedPipeConstants.DEFAULT_TOL_WALL):
        super().__init__(tag, nd1, nd2, mat, sect, T0=T0, pressure=pressure, c_mass=c_mass)

        center = np.array(center, dtype=float).ravel()
        if center.size != 3:
            raise ValueError(f"CurvedPipe {tag}: center must have 3 coordinates, got {center.size}")
        if tol_wall < 0 or tol_wall > 1:
            raise ValueError(f"CurvedPipe {tag}: tol_wall must be in [0, 1], got {tol_wall}")

        self.center = center
        self.tol_wall = tol_wall

        self.radius = 0.0
        self.theta0 = 0.0
        self.z_axis = None
        self.formulation = None
        self._ub0 = np.zeros(6)

    def get_class_type(self):
        return "CurvedPipe"

    # ==========================================================================
    # Domain binding
    # ==========================================================================
    def set_domain(self, domain):
        """
        Resolve the nodes and derive the bend geometry.

        Returns
        -------
        int
            0 when bound, -1 when the geometry violates the radius tolerance or
            the arc angle limit (a GeometryWarning is issued)

        Raises
        ------
        ModelError
            Missing or non 3-D domain, unknown node, degenerate geometry
        """
        if domain is None:
            raise ModelError(f"CurvedPipe {self.tag}: domain is null")

        if domain.ndm != 3:
            raise ModelError(f"CurvedPipe {self.tag}: pipe element must be 3D, domain has ndm={domain.ndm}")

        nodes = []
        for k, nd in enumerate(self.connect):
            node = domain.get_node(nd)
            if node is None:
                raise ModelError(f"CurvedPipe {self.tag}: node {k + 1} ({nd}) does not exist")
            if node.get_crds().size != 3:
                raise ModelError(f"CurvedPipe {self.tag}: node {nd} does not have 3 coordinates")
            nodes.append(node)

        crds_i = nodes[0].get_crds()
        crds_j = nodes[1].get_crds()

        CI = crds_i - self.center
        IJ = crds_j - crds_i
        if np.linalg.norm(CI) == 0.0 or np.linalg.norm(IJ) == 0.0:
            raise ModelError(f"CurvedPipe {self.tag}: coincident nodes or node at arc center")
        CI = CI / np.linalg.norm(CI)
        IJ = IJ / np.linalg.norm(IJ)

        z_axis = np.cross(CI, IJ)
        if np.linalg.norm(z_axis) == 0.0:
            raise ModelError(f"CurvedPipe {self.tag}: nodes and center are colinear")

        # the previous transformation is released before the new one is built
        self.transf = None
        self.formulation = None
        self.state = ElementState.UNBOUND
        self.radius = 0.0
        self.theta0 = 0.0

        self.transf = LinearTransform3D(self.tag, z_axis)
        self.transf.initialize(nodes[0], nodes[1])
        self.z_axis = z_axis / np.linalg.norm(z_axis)

        self.domain = domain
        self.nodes = nodes

        if self.update_section_data() < 0:
            warnings.warn(f"CurvedPipe {self.tag}: failed to update section data", NumericalWarning)
            return -1
        if self.update_material_data() < 0:
            warnings.warn(f"CurvedPipe {self.tag}: failed to update material data", NumericalWarning)
            return -1

        if self.compute_theta0() < 0:
            return -1

        self.formulation = PipeFlexibility(self.radius, self.theta0, self.transf.get_initial_length())
        self.state = ElementState.BOUND

        logger.debug("CurvedPipe %s bound: R=%.6g, theta0=%.6g rad, L=%.6g",
                     self.tag, self.radius, self.theta0, self.transf.get_initial_length())
        return 0

    def compute_theta0(self):
        """
        Radius and half angle from the node positions.

        Returns
        -------
        int
            0 on success, -1 if the element has no nodes yet or the radius
            or the angle checks fail
        """
        if self.transf is None:
            warnings.warn(f"CurvedPipe {self.tag}: element is not bound to a domain", GeometryWarning)
            return -1

        crds1 = self.nodes[0].get_crds()
        crds2 = self.nodes[1].get_crds()

        R1 = np.linalg.norm(self.center - crds1)
        R2 = np.linalg.norm(self.center - crds2)
        radius = (R1 + R2) / 2.0
        if radius <= 0:
            warnings.warn(f"CurvedPipe {self.tag}: radius <= 0", GeometryWarning)
            return -1

        thk = self.sect.wall_thickness()
        if abs(R1 - R2) > self.tol_wall * thk:
            warnings.warn(
                f"CurvedPipe {self.tag}: the radius computed from node I ({R1:.6g}) differs from the "
                f"one computed from node J ({R2:.6g}) by more than {self.tol_wall} * wall thickness",
                GeometryWarning,
            )
            return -1

        Lhalf = self.transf.get_initial_length() / 2.0
        if Lhalf >= CurvedPipeConstants.MAX_HALF_CHORD_RATIO * radius:
            warnings.warn(f"CurvedPipe {self.tag}: the angle of the curve >= 178 degree", GeometryWarning)
            return -1

        self.radius = radius
        self.theta0 = np.arcsin(Lhalf / radius)
        return 0

    # ==========================================================================
    # Formulation hooks
    # ==========================================================================
    def properties(self):
        return PipeProperties(
            E=self.E, G=self.G, nu=self.nu, alpha=self.alp,
            A=self.A, Iy=self.Iy, Iz=self.Iz, J=self.Jx,
            alpha_v=self.sect.shear_correction_factor(),
            d_out=self.sect.outer_diameter(),
            t=self.sect.wall_thickness(),
        )

    def kb(self):
        """
        Basic stiffness and particular basic forces of the loaded bend.

        Returns
        -------
        status : int
            0 on success, -1 on failure
        kb : np.ndarray or None
            Basic stiffness (6, 6)
        pb0 : np.ndarray or None
            Particular basic forces (6,)
        """
        if self.formulation is None:
            warnings.warn(f"CurvedPipe {self.tag}: element is not bound to a domain", GeometryWarning)
            return -1, None, None

        if self.update_section_data() < 0:
            return -1, None, None
        if self.update_material_data() < 0:
            return -1, None, None

        self.formulation.props = self.properties()
        status, kb, pb0, ub0 = self.formulation.kb(self.w, self.ave_temp(), self.pressure, self.T0)
        if ub0 is not None:
            self._ub0 = ub0
        return status, kb, pb0

    def basic_stiffness(self):
        return self.kb()

    def fixed_end_force(self):
        return self.formulation.plw(self.w)

    def member_length(self):
        return self.arc_length()

    def arc_length(self):
        return 2.0 * self.radius * self.theta0

    def particular_deformation(self):
        """Particular basic deformations u_b0 of the last kb evaluation."""
        return self._ub0

    # ==========================================================================
    # Load reset
    # ==========================================================================
    def zero_load(self):
        """
        Remove all member loads, then resynchronize the cached section and
        material data at the unloaded temperature.

        Returns
        -------
        int
            0 on success, -1 if the section or material refresh failed (the
            loads are removed in both cases)
        """
        super().zero_load()

        if self.update_section_data() < 0:
            warnings.warn(f"CurvedPipe {self.tag}: failed to update section data", NumericalWarning)
            return -1
        if self.update_material_data() < 0:
            warnings.warn(f"CurvedPipe {self.tag}: failed to update material data", NumericalWarning)
            return -1
        return 0

    # ==========================================================================
    # Plotting
    # ==========================================================================
    def arc_coordinates(self, disc=20):
        """
        Points along the undeformed arc from node I to node J, shape (disc, 3).

        An unbound element has no arc: a GeometryWarning is issued and an
        empty (0, 3) array returned.
        """
        if self.formulation is None:
            warnings.warn(f"CurvedPipe {self.tag}: element is not bound to a domain", GeometryWarning)
            return np.zeros((0, 3))

        crds_i = self.nodes[0].get_crds()
        e1 = (crds_i - self.center) / np.linalg.norm(crds_i - self.center)
        e2 = np.cross(self.z_axis, e1)

        # e2 must point from node I towards node J along the arc
        if np.dot(self.nodes[1].get_crds() - crds_i, e2) < 0:
            e2 = -e2

        phi = np.linspace(0.0, 2 * self.theta0, disc)
        return (self.center
                + self.radius * np.outer(np.cos(phi), e1)
                + self.radius * np.outer(np.sin(phi), e2))

    def plot_undeformed_shape(self, ax=None, disc=20):
        if ax is None:
            ax = plt.figure().add_subplot(projection="3d")

        pts = self.arc_coordinates(disc)
        x_undef, y_undef, z_undef = pts[:, 0], pts[:, 1], pts[:, 2]
        if len(pts) == 0:
            return x_undef, y_undef, z_undef

        ax.plot(x_undef, y_undef, z_undef, linewidth=1.5, color="black")
        ax.plot([x_undef[0]], [y_undef[0]], [z_undef[0]], color="black", marker="o", markersize=3)
        ax.plot([x_undef[-1]], [y_undef[-1]], [z_undef[-1]], color="black", marker="o", markersize=3)

        return x_undef, y_undef, z_undef

    def __repr__(self):
        return (f"<CurvedPipe tag={self.tag} nodes={self.connect} "
                f"R={self.radius:.4g} theta0={self.theta0:.4g} state={self.state.value}>")
