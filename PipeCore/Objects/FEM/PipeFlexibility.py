"""
Curved Pipe Flexibility Formulation
===================================

Force-based formulation of a circular pipe bend. Equilibrium of the curved
member gives, for every angular position θ along the arc (θ = 0 at the arc
midpoint, ends at ∓θ0), the stress resultants

    s(θ) = b(θ) · q + s_p(θ)

with q the 6 basic end forces [N, Mz_i, Mz_j, My_i, My_j, T] and s_p the
resultants produced by distributed member loads. The 6 local stress
resultants are ordered

    s = [N, Mz, My, T, Vy, Vz]

Complementary energy then gives the basic flexibility and the basic
deformations of the loaded member with fixed ends (particular deformations):

    F_b  = R ∫ b^T f_s b dθ
    u_b0 = R ∫ b^T f_s s_p dθ   (+ thermal and internal-pressure terms)

Inverting F_b yields the basic stiffness k_b and the particular basic forces
p_b0 = -k_b · u_b0.

Integrals are evaluated with the fixed 20-point Gauss-Legendre rule.
"""

import warnings
from dataclasses import dataclass

import numpy as np
import scipy.linalg as la

from PipeCore.Objects.FEM.BaseFE import NumericalWarning
from PipeCore.Objects.FEM.GaussLegendre import integrate_arc


class CurvedPipeConstants:
    """Numerical limits of the curved pipe formulation."""
    MAX_HALF_CHORD_RATIO = 0.99985  # half chord / radius, i.e. arc < 178 degrees
    SHEAR_FACTOR_SENTINEL = 99.0    # shear factors above this: rigid in shear
    DEFAULT_TOL_WALL = 0.1          # radius tolerance as fraction of wall thickness


@dataclass
class PipeProperties:
    """
    Material and section data read from the collaborators before each use.

    Attributes:
        E: Elastic modulus
        G: Shear modulus
        nu: Poisson ratio
        alpha: Thermal expansion coefficient
        A: Cross-sectional area
        Iy: Second moment of area about local y
        Iz: Second moment of area about local z
        J: Torsion constant
        alpha_v: Shear area factor (A_shear = A / alpha_v)
        d_out: Outer diameter
        t: Wall thickness
    """
    E: float
    G: float
    nu: float
    alpha: float
    A: float
    Iy: float
    Iz: float
    J: float
    alpha_v: float
    d_out: float
    t: float


class PipeFlexibility:
    """
    Basic stiffness and particular forces of a circular pipe bend.

    Parameters
    ----------
    radius : float
        Bend radius
    theta0 : float
        Half subtended angle [rad]
    L : float
        Chord length
    props : PipeProperties, optional
        Current material and section data
    """

    def __init__(self, radius, theta0, L, props=None):
        self.radius = radius
        self.theta0 = theta0
        self.L = L
        self.props = props

    # ------------------------------------------------------------------
    # Force transformation
    # ------------------------------------------------------------------
    def bx(self, theta):
        """6x6 matrix mapping basic forces to stress resultants at θ."""
        c = np.cos(theta)
        s = np.sin(theta)
        R = self.radius
        t0 = self.theta0
        invL = 1.0 / self.L
        H = R * (c - np.cos(t0))
        H0 = R * np.cos(t0)

        b = np.zeros((6, 6))
        # axial force
        b[0, 0] = c
        b[0, 1] = -s * invL
        b[0, 2] = -s * invL
        # in-plane moment
        b[1, 0] = -H
        b[1, 1] = R * s * invL - 0.5
        b[1, 2] = R * s * invL + 0.5
        # out-of-plane moment
        b[2, 3] = s * H0 * invL - 0.5 * c
        b[2, 4] = s * H0 * invL + 0.5 * c
        b[2, 5] = -s
        # torsion
        b[3, 3] = R * invL * (1 - np.cos(theta - t0))
        b[3, 4] = R * invL * (1 - np.cos(theta + t0))
        b[3, 5] = c
        # shears
        b[4, 0] = s
        b[4, 1] = c * invL
        b[4, 2] = c * invL
        b[5, 3] = invL
        b[5, 4] = invL

        return b

    # ------------------------------------------------------------------
    # Section flexibility
    # ------------------------------------------------------------------
    def fs(self, theta):
        """
        Diagonal section flexibility at θ.

        The shear terms vanish when the section reports no shear factor
        (value above CurvedPipeConstants.SHEAR_FACTOR_SENTINEL).
        """
        p = self.props
        f = np.zeros((6, 6))

        f[0, 0] = 1.0 / (p.E * p.A)
        f[1, 1] = 1.0 / (p.E * p.Iz)
        f[2, 2] = 1.0 / (p.E * p.Iy)
        f[3, 3] = 1.0 / (p.G * p.J)

        alpha_v = p.alpha_v
        if alpha_v > CurvedPipeConstants.SHEAR_FACTOR_SENTINEL:
            alpha_v = 0.0
        if alpha_v > 0:
            Ay = p.A / alpha_v
            Az = p.A / alpha_v
            f[4, 4] = 1.0 / (p.G * Ay)
            f[5, 5] = 1.0 / (p.G * Az)

        return f

    # ------------------------------------------------------------------
    # Member loads
    # ------------------------------------------------------------------
    def spx(self, theta, w):
        """
        Stress resultants at θ due to uniform member loads with fixed basic forces.

        Parameters
        ----------
        theta : float
            Angular position
        w : sequence of float
            Distributed load (wx, wy, wz) per unit length along local axes
        """
        wx, wy, wz = w
        c = np.cos(theta)
        s = np.sin(theta)
        R = self.radius
        R2 = R * R
        t0 = self.theta0
        L = self.L
        invL = 1.0 / L
        H0 = R * np.cos(t0)
        stt0 = np.sin(theta - t0)
        ctt0 = np.cos(theta - t0)

        sp = np.zeros(6)
        sp[0] = (wx * R * (c * t0 - s - c * theta + 2 * s * t0 * H0 * invL)
                 - wy * R * s * theta)
        sp[1] = (wx * R * (c * R * theta - 2 * s * R * t0 * H0 * invL - c * R * t0 + t0 * H0)
                 + wy * R * (s * R * theta - t0 * L * 0.5 + c * R - H0))
        sp[2] = wz * R2 * (-t0 * stt0 + ctt0 - 1)
        sp[3] = wz * R2 * (-theta + t0 * ctt0 + stt0)
        sp[4] = (wx * R * (c + s * t0 - s * theta - 2 * c * t0 * H0 * invL)
                 + wy * R * c * theta)
        sp[5] = -wz * R * theta

        return sp

    def plw(self, w):
        """
        Fixed-end force correction of the member loads.

        Ordered as the transformation expects it:
        [N_i, Vy_i, Vy_j, Vz_i, Vz_j, T_i]
        """
        wx, wy, wz = w
        R = self.radius
        t0 = self.theta0
        L = self.L
        H0 = R * np.cos(t0)

        p0 = np.zeros(6)
        p0[0] = -2 * wx * R * t0
        p0[1] = wx * R * (1.0 - 2 * t0 * H0 / L) - wy * R * t0
        p0[2] = -wx * R * (1.0 - 2 * t0 * H0 / L) - wy * R * t0
        p0[3] = -wz * R * t0
        p0[4] = -wz * R * t0
        p0[5] = wz * R * (L - 2 * t0 * H0)

        return p0

    # ------------------------------------------------------------------
    # Arc integration
    # ------------------------------------------------------------------
    def fb(self, theta):
        b = self.bx(theta)
        return b.T @ self.fs(theta) @ b

    def ubno(self, theta, w):
        return self.bx(theta).T @ (self.fs(theta) @ self.spx(theta, w))

    def integrate(self, w=(0.0, 0.0, 0.0)):
        """
        Basic flexibility and member-load particular deformations.

        Returns
        -------
        Fb : np.ndarray
            Basic flexibility (6, 6)
        ub0 : np.ndarray
            Particular basic deformations due to member loads (6,)
        """
        Fb = integrate_arc(self.fb, self.theta0, self.radius)
        if np.any(w):
            ub0 = integrate_arc(lambda theta: self.ubno(theta, w), self.theta0, self.radius)
        else:
            ub0 = np.zeros(6)
        return Fb, ub0

    # ------------------------------------------------------------------
    # Load correctors
    # ------------------------------------------------------------------
    def thermal_deformation(self, dT):
        """Free thermal elongation of the chord for a temperature rise dT."""
        ub = np.zeros(6)
        if dT > 0:
            ub[0] = 2 * self.radius * self.props.alpha * dT * np.sin(self.theta0)
        return ub

    def pressure_deformation(self, pressure):
        """
        Basic deformations of the bend under internal pressure.

        Accounts for the elongation of the pipe wall and the change of bend
        curvature from ovalization (Bourdon effect).

        Returns
        -------
        ub : np.ndarray or None
            Particular deformations (6,), None if the bend radius equals the
            mean pipe radius
        """
        ub = np.zeros(6)
        if pressure == 0:
            return ub

        p = self.props
        R = self.radius
        t0 = self.theta0
        nu = p.nu

        RM = (p.d_out - p.t) * 0.5
        DU2 = R / RM
        if DU2 == 1.0:
            return None
        DUM = pressure * RM * 0.5 / (p.E * p.t)
        DU3 = 1.0 + DUM * (1 - nu * (2 * DU2 - 1) / (DU2 - 1))
        BTA = DU3 / (1.0 + DUM * (2 - nu))
        BTA = -(1.0 - BTA) / R

        ub[0] += 0.5 * pressure * R * (p.d_out - p.t) * (1. - 2 * nu) * np.sin(t0) / (p.E * p.t)
        ub[0] += 2 * R * R * BTA * (t0 * np.cos(t0) - np.sin(t0))
        ub[1] += -R * BTA * t0
        ub[2] += R * BTA * t0

        return ub

    # ------------------------------------------------------------------
    # Basic stiffness
    # ------------------------------------------------------------------
    def kb(self, w=(0.0, 0.0, 0.0), dT=0.0, pressure=0.0, T0=0.0):
        """
        Basic stiffness and particular basic forces.

        Parameters
        ----------
        w : sequence of float
            Distributed load (wx, wy, wz)
        dT : float
            Average temperature change
        pressure : float
            Internal pressure
        T0 : float
            Initial axial force

        Returns
        -------
        status : int
            0 on success, -1 on failure
        kb : np.ndarray or None
            Basic stiffness (6, 6)
        pb0 : np.ndarray or None
            Particular basic forces (6,)
        ub0 : np.ndarray or None
            Particular basic deformations (6,)
        """
        Fb, ub0 = self.integrate(w)

        ub0 = ub0 + self.thermal_deformation(dT)

        ubp = self.pressure_deformation(pressure)
        if ubp is None:
            warnings.warn("Bend radius equals mean pipe radius, pressure terms undefined",
                          NumericalWarning)
            return -1, None, None, None
        ub0 = ub0 + ubp

        try:
            kb = la.inv(Fb)
        except (la.LinAlgError, ValueError):
            return -1, None, None, ub0
        if not np.all(np.isfinite(kb)):
            return -1, None, None, ub0

        pb0 = -kb @ ub0
        pb0[0] += T0

        return 0, kb, pb0, ub0
