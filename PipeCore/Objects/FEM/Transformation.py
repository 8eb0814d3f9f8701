"""
Linear 3-D Coordinate Transformation
====================================

Maps between the global DOFs of a 2-node 3-D beam (6 per node) and its basic
system, the 6 deformation/force components free of rigid-body modes:

    q = [N, Mz_i, Mz_j, My_i, My_j, T]
    v = [axial, theta_z,i, theta_z,j, theta_y,i, theta_y,j, twist]

The local frame is built from the chord and a vector lying in the local x-z
plane (`vecxz`):

    x = (X_j - X_i) / L
    y = (vecxz × x) / |vecxz × x|
    z = x × y

Geometry is linear: the frame and the chord length are taken from the
initial node positions.
"""

import numpy as np

from PipeCore.Objects.FEM.BaseFE import ModelError


class LinearTransform3D:
    """
    Small-displacement transformation between basic and global systems.

    Attributes
    ----------
    tag : int
        Transformation identifier
    vecxz : np.ndarray
        Vector in the local x-z plane
    L : float
        Initial chord length
    R : np.ndarray
        3x3 rotation, rows are the local x, y, z axes in global coordinates
    """

    def __init__(self, tag, vecxz):
        self.tag = tag
        self.vecxz = np.array(vecxz, dtype=float)
        if self.vecxz.shape != (3,):
            raise ModelError(f"Transformation {tag}: vecxz must have 3 components")

        self.node_i = None
        self.node_j = None
        self.L = 0.0
        self.R = np.eye(3)

    def initialize(self, node_i, node_j):
        """Compute chord length and local axes from the node coordinates."""
        self.node_i = node_i
        self.node_j = node_j

        dx = node_j.get_crds()[:3] - node_i.get_crds()[:3]
        self.L = np.linalg.norm(dx)
        if self.L == 0.0:
            raise ModelError(
                f"Transformation {self.tag}: nodes {node_i.tag} and {node_j.tag} coincide"
            )

        x_axis = dx / self.L
        y_axis = np.cross(self.vecxz, x_axis)
        y_norm = np.linalg.norm(y_axis)
        if y_norm == 0.0:
            raise ModelError(
                f"Transformation {self.tag}: vecxz is parallel to the element axis"
            )
        y_axis /= y_norm
        z_axis = np.cross(x_axis, y_axis)

        self.R = np.vstack((x_axis, y_axis, z_axis))

    def get_initial_length(self):
        return self.L

    @property
    def T(self):
        """12x12 global-to-local rotation (block diagonal in R)."""
        T = np.zeros((12, 12))
        for k in range(4):
            T[3 * k:3 * k + 3, 3 * k:3 * k + 3] = self.R
        return T

    @property
    def A(self):
        """6x12 local-to-basic compatibility matrix."""
        invL = 1.0 / self.L
        A = np.zeros((6, 12))
        A[0, 0], A[0, 6] = -1, 1
        A[1, 1], A[1, 5], A[1, 7] = invL, 1, -invL
        A[2, 1], A[2, 7], A[2, 11] = invL, -invL, 1
        A[3, 2], A[3, 4], A[3, 8] = -invL, 1, invL
        A[4, 2], A[4, 8], A[4, 10] = -invL, invL, 1
        A[5, 3], A[5, 9] = -1, 1
        return A

    def get_global_disp(self):
        return np.concatenate((self.node_i.get_trial_disp(), self.node_j.get_trial_disp()))

    def get_basic_trial_disp(self):
        """Basic deformations from the current trial displacements of both nodes."""
        ul = self.T @ self.get_global_disp()
        return self.A @ ul

    def get_initial_global_stiff_matrix(self, kb):
        """Global stiffness kg = T^T A^T kb A T."""
        TA = self.A @ self.T
        return TA.T @ kb @ TA

    def get_global_stiff_matrix(self, kb, pb):
        # Linear geometry: basic forces add no geometric stiffness
        return self.get_initial_global_stiff_matrix(kb)

    def get_global_resisting_force(self, pb, p0):
        """
        Global nodal forces from basic forces and a fixed-end correction.

        Parameters
        ----------
        pb : np.ndarray
            Basic forces (6,)
        p0 : np.ndarray
            Fixed-end force correction (6,), added to the local components
            [N_i, Vy_i, Vy_j, Vz_i, Vz_j, T_i]

        Returns
        -------
        np.ndarray
            Global resisting force (12,)
        """
        pl = self.A.T @ pb

        pl[0] += p0[0]
        pl[1] += p0[1]
        pl[7] += p0[2]
        pl[2] += p0[3]
        pl[8] += p0[4]
        pl[3] += p0[5]

        return self.T.T @ pl

    def get_global_matrix_from_local(self, ml):
        """Rotate a local 12x12 matrix (e.g. a mass matrix) to global axes."""
        T = self.T
        return T.T @ ml @ T
