import warnings
from abc import ABC, abstractmethod
from copy import deepcopy

import numpy as np

from PipeCore.Objects.FEM.BaseFE import NumericalWarning


class ElasticMaterialProperties(ABC):
    """
    Capability interface of the material consumed by pipe elements.

    An element only needs the current elastic constants and the thermal
    expansion coefficient. They are read again before every stiffness
    evaluation since `update_temperature` may change them.
    """

    @property
    @abstractmethod
    def E(self):
        pass

    @property
    @abstractmethod
    def nu(self):
        pass

    @property
    @abstractmethod
    def alpha(self):
        pass

    @property
    def G(self):
        return self.E / (2 * (1 + self.nu))

    @abstractmethod
    def update_temperature(self, T):
        pass


class PipeMaterial(ElasticMaterialProperties):
    """
    Temperature-dependent linear elastic material for piping.

    Elastic modulus, Poisson ratio and thermal expansion coefficient are given
    at a set of temperatures and linearly interpolated in between.

    Parameters
    ----------
    tag : int
        Material identifier
    points : sequence of (T, E, nu, alpha)
        Property table sorted by strictly increasing temperature. A single row
        gives a temperature-independent material.

    Attributes
    ----------
    temperature : float
        Temperature at which the current properties were evaluated
    stiff : dict
        Current elastic constants {'E': float, 'G': float}

    Examples
    --------
    >>> steel = PipeMaterial(1, [(0.0, 200e9, 0.3, 1.2e-5),
    ...                          (300.0, 180e9, 0.3, 1.4e-5)])
    >>> steel.update_temperature(150.0)
    0
    >>> float(steel.E)
    190000000000.0
    """

    def __init__(self, tag, points):
        table = np.atleast_2d(np.asarray(points, dtype=float))

        if table.size == 0:
            raise ValueError("PipeMaterial needs at least one (T, E, nu, alpha) row")
        if table.shape[1] != 4:
            raise ValueError(f"Each row must be (T, E, nu, alpha), got {table.shape[1]} columns")
        if np.any(table[:, 1] <= 0):
            raise ValueError("Elastic modulus must be positive")
        if np.any(table[:, 2] <= -1) or np.any(table[:, 2] >= 0.5):
            raise ValueError("Poisson ratio must be in range (-1, 0.5)")
        if np.any(np.diff(table[:, 0]) <= 0):
            raise ValueError("Temperatures must be strictly increasing")

        self.tag = tag
        self.table = table
        self.stiff = {}
        self.temperature = None

        self._set_row(table[0, 1:])
        self.temperature = table[0, 0]

    @classmethod
    def elastic(cls, tag, E, nu, alpha=0.0):
        """Temperature-independent material."""
        return cls(tag, [(0.0, E, nu, alpha)])

    def copy(self):
        """Return a deep copy of this material."""
        return deepcopy(self)

    @property
    def E(self):
        return self.stiff['E']

    @property
    def nu(self):
        return self._nu

    @property
    def alpha(self):
        return self._alpha

    @property
    def G(self):
        return self.stiff['G']

    def _set_row(self, row):
        E, nu, alpha = row
        self.stiff['E'] = E
        self.stiff['G'] = E / (2 * (1 + nu))
        self._nu = nu
        self._alpha = alpha

    def update_temperature(self, T):
        """
        Evaluate the properties at temperature T.

        Returns
        -------
        int
            0 on success, -1 if T lies outside the property table
        """
        temps = self.table[:, 0]

        if len(temps) == 1:
            self.temperature = T
            return 0

        if T < temps[0] or T > temps[-1]:
            warnings.warn(
                f"PipeMaterial {self.tag}: temperature {T} outside table range "
                f"[{temps[0]}, {temps[-1]}]",
                NumericalWarning,
            )
            return -1

        row = [np.interp(T, temps, self.table[:, k]) for k in (1, 2, 3)]
        self._set_row(row)
        self.temperature = T

        return 0

    def __repr__(self):
        return f"<PipeMaterial tag={self.tag} E={self.E:.4g} nu={self.nu} alpha={self.alpha:.4g}>"
