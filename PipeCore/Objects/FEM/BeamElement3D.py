"""
3-D Beam Element Base
=====================

Common machinery of 2-node 3-D beam elements formulated in the basic system:

1. **Load State**: uniform member loads (wx, wy, wz), thermal loads and the
   unbalanced inertia load Q
2. **Section/Material Refresh**: properties are read from the collaborators
   before each use
3. **Force Assembly**: subclasses supply the basic stiffness k_b, the
   particular basic forces p_b0 and the fixed-end force correction p0; this
   class turns them into global stiffness and resisting force through the
   coordinate transformation:

       q = k_b · v + p_b0
       K = T^T A^T k_b A T
       P = T^T (A^T q + p0) - Q        (Q only when the element has mass)

4. **Mass**: lumped or consistent mass from the section mass per length
"""

import logging
import warnings
from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from PipeCore.Objects.FEM.BaseFE import BaseFE, NumericalWarning

logger = logging.getLogger(__name__)


class ElementState(Enum):
    UNBOUND = "unbound"
    BOUND = "bound"
    EVALUATED = "evaluated"


@dataclass
class BeamUniformLoad:
    """
    Uniform member load per unit length along the local axes.

    Attributes:
        wy: Load along local y
        wz: Load along local z
        wx: Load along local x (axial)
    """
    wy: float
    wz: float
    wx: float = 0.0


@dataclass
class BeamThermalLoad:
    """
    Temperature change over the cross-section.

    Attributes:
        temperatures: Temperature changes at the section points; their mean
            is the average temperature change of the member.
    """
    temperatures: Sequence[float]

    def __post_init__(self):
        self.temperatures = np.atleast_1d(np.asarray(self.temperatures, dtype=float))
        if self.temperatures.size == 0:
            raise ValueError("Thermal load needs at least one temperature")

    @property
    def average(self):
        return float(np.mean(self.temperatures))


class BeamElement3D(BaseFE):
    """
    Base class of 2-node 3-D beam elements (6 DOFs per node).

    Attributes
    ----------
    tag : int
        Element identifier
    connect : list
        Tags of the two end nodes
    mat : ElasticMaterialProperties
        Borrowed material
    sect : CrossSectionProperties
        Borrowed section
    transf : LinearTransform3D
        Coordinate transformation owned by the element (None until bound)
    wx, wy, wz : float
        Accumulated uniform member loads
    Q : np.ndarray
        Unbalanced inertia load (12,)
    q : np.ndarray
        Current basic forces (6,)
    P : np.ndarray
        Last global resisting force (12,)
    K : np.ndarray
        Last global stiffness (12, 12)
    """
    DOFS_PER_NODE = 6

    def __init__(self, tag, nd1, nd2, mat, sect, T0=0.0, pressure=0.0, c_mass=False):
        self.tag = tag
        self.connect = [nd1, nd2]
        self.mat = mat
        self.sect = sect

        self.T0 = T0
        self.pressure = pressure
        self.c_mass = bool(c_mass)

        self.domain = None
        self.nodes = [None, None]
        self.transf = None
        self.state = ElementState.UNBOUND

        # Load state
        self.wx = 0.0
        self.wy = 0.0
        self.wz = 0.0
        self.temp = 0.0
        self.Q = np.zeros(12)

        # Cached response
        self.q = np.zeros(6)
        self.P = np.zeros(12)
        self.K = np.zeros((12, 12))

        # Section data
        self.A = 0.0
        self.Iy = 0.0
        self.Iz = 0.0
        self.Jx = 0.0
        self.rho = 0.0

        # Material data
        self.E = 0.0
        self.G = 0.0
        self.nu = 0.0
        self.alp = 0.0

    # ==========================================================================
    # Hooks supplied by the formulation
    # ==========================================================================
    @abstractmethod
    def basic_stiffness(self):
        """Return (status, kb, pb0); negative status on failure."""
        pass

    @abstractmethod
    def fixed_end_force(self):
        """Fixed-end force correction (6,) handed to the transformation."""
        pass

    @abstractmethod
    def member_length(self):
        """Length used to distribute the element mass."""
        pass

    # ==========================================================================
    # Section and material data
    # ==========================================================================
    def update_section_data(self):
        sect = self.sect
        self.A = sect.area()
        self.Iy = sect.iy()
        self.Iz = sect.iz()
        self.Jx = sect.torsion_constant()
        self.rho = sect.mass_per_length()

        if self.A <= 0 or self.Iy <= 0 or self.Iz <= 0 or self.Jx <= 0:
            warnings.warn(f"Element {self.tag}: non-positive section properties", NumericalWarning)
            return -1
        return 0

    def update_material_data(self):
        if self.mat.update_temperature(self.ave_temp()) < 0:
            return -1

        self.E = self.mat.E
        self.G = self.mat.G
        self.nu = self.mat.nu
        self.alp = self.mat.alpha
        return 0

    # ==========================================================================
    # Loads
    # ==========================================================================
    def add_load(self, load, load_factor=1.0):
        """
        Add a member load scaled by load_factor.

        Parameters
        ----------
        load : BeamUniformLoad or BeamThermalLoad
            Member load
        load_factor : float
            Scale applied to the load
        """
        if isinstance(load, BeamUniformLoad):
            self.wx += load_factor * load.wx
            self.wy += load_factor * load.wy
            self.wz += load_factor * load.wz
        elif isinstance(load, BeamThermalLoad):
            self.temp += load_factor * load.average
        else:
            raise TypeError(f"Element {self.tag}: unsupported load type {type(load).__name__}")
        return 0

    @property
    def w(self):
        return np.array([self.wx, self.wy, self.wz])

    def ave_temp(self):
        """Average temperature change of the member."""
        return self.temp

    def zero_load(self):
        self.wx = 0.0
        self.wy = 0.0
        self.wz = 0.0
        self.temp = 0.0
        self.Q[:] = 0.0

    # ==========================================================================
    # Mass
    # ==========================================================================
    def get_mass(self):
        """
        Global 12x12 mass matrix.

        Lumped: half the member mass on the translations of each node.
        Consistent: cubic Hermitian beam mass with torsional inertia rho*J/A.
        """
        M = np.zeros((12, 12))
        if self.rho == 0.0 or self.transf is None:
            return M

        L = self.member_length()

        if not self.c_mass:
            m = 0.5 * self.rho * L
            for k in (0, 1, 2, 6, 7, 8):
                M[k, k] = m
            return M

        m = self.rho * L / 420.0
        rx = self.Jx / self.A

        # axial
        M[0, 0] = M[6, 6] = 140 * m
        M[0, 6] = 70 * m
        # torsion
        M[3, 3] = M[9, 9] = rx * 140 * m
        M[3, 9] = rx * 70 * m
        # bending in local x-y plane
        M[1, 1] = M[7, 7] = 156 * m
        M[1, 5] = 22 * L * m
        M[1, 7] = 54 * m
        M[1, 11] = -13 * L * m
        M[5, 5] = M[11, 11] = 4 * L * L * m
        M[5, 7] = 13 * L * m
        M[5, 11] = -3 * L * L * m
        M[7, 11] = -22 * L * m
        # bending in local x-z plane
        M[2, 2] = M[8, 8] = 156 * m
        M[2, 4] = -22 * L * m
        M[2, 8] = 54 * m
        M[2, 10] = 13 * L * m
        M[4, 4] = M[10, 10] = 4 * L * L * m
        M[4, 8] = -13 * L * m
        M[4, 10] = -3 * L * L * m
        M[8, 10] = 22 * L * m

        M = np.triu(M) + np.triu(M, 1).T

        return self.transf.get_global_matrix_from_local(M)

    def add_inertia_load_to_unbalance(self, accel):
        """
        Subtract the inertia load M·accel from the unbalanced load Q.

        Parameters
        ----------
        accel : array-like
            Nodal accelerations (12,), or (6,) applied at both nodes
        """
        if self.rho == 0.0:
            return 0

        accel = np.asarray(accel, dtype=float)
        if accel.shape == (6,):
            accel = np.concatenate((accel, accel))
        if accel.shape != (12,):
            raise ValueError(f"Element {self.tag}: acceleration must have 6 or 12 components")

        self.Q -= self.get_mass() @ accel
        return 0

    # ==========================================================================
    # Stiffness and resisting force
    # ==========================================================================
    def basic_force(self):
        return self.q

    def get_tangent_stiff(self):
        status, kb, pb0 = self.basic_stiffness()
        if status < 0:
            logger.warning("Element %s: failed to compute kb -- get_tangent_stiff", self.tag)
            warnings.warn(f"Element {self.tag}: failed to compute kb -- get_tangent_stiff",
                          NumericalWarning)
            self.K = np.zeros((12, 12))
            return self.K

        v = self.transf.get_basic_trial_disp()
        self.q = kb @ v + pb0
        self.state = ElementState.EVALUATED

        self.K = self.transf.get_global_stiff_matrix(kb, self.q)
        return self.K

    def get_initial_stiff(self):
        status, kb, _ = self.basic_stiffness()
        if status < 0:
            logger.warning("Element %s: failed to compute kb -- get_initial_stiff", self.tag)
            warnings.warn(f"Element {self.tag}: failed to compute kb -- get_initial_stiff",
                          NumericalWarning)
            self.K = np.zeros((12, 12))
            return self.K

        self.state = ElementState.EVALUATED
        self.K = self.transf.get_initial_global_stiff_matrix(kb)
        return self.K

    def get_resisting_force(self):
        status, kb, pb0 = self.basic_stiffness()
        if status < 0:
            logger.warning("Element %s: failed to compute kb -- get_resisting_force", self.tag)
            warnings.warn(f"Element {self.tag}: failed to compute kb -- get_resisting_force",
                          NumericalWarning)
            self.P = np.zeros(12)
            return self.P

        v = self.transf.get_basic_trial_disp()
        self.q = kb @ v + pb0
        self.state = ElementState.EVALUATED

        self.P = self.transf.get_global_resisting_force(self.q, self.fixed_end_force())

        # subtract external load P = P - Q
        if self.rho != 0:
            self.P = self.P - self.Q

        return self.P
