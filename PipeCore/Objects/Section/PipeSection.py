from abc import ABC, abstractmethod
from copy import deepcopy

import numpy as np


class CrossSectionProperties(ABC):
    """Capability interface of the cross-section consumed by pipe elements."""

    @abstractmethod
    def area(self):
        pass

    @abstractmethod
    def iy(self):
        pass

    @abstractmethod
    def iz(self):
        pass

    @abstractmethod
    def torsion_constant(self):
        pass

    @abstractmethod
    def wall_thickness(self):
        pass

    @abstractmethod
    def outer_diameter(self):
        pass

    @abstractmethod
    def shear_correction_factor(self):
        pass

    @abstractmethod
    def mass_per_length(self):
        pass


class PipeSection(CrossSectionProperties):
    """
    Circular hollow section of a pipe.

    Attributes:
        tag: Section identifier
        d_out: Outer diameter [m]
        t: Wall thickness [m]
        alpha_v: Shear area factor, A_shear = A / alpha_v. Values above 99
            mean no shear deformation (rigid in shear).
        rho: Mass per unit length [kg/m]
    """
    SHEAR_RIGID = 100.0
    DEFAULT_ALPHA_V = 2.0  # thin-walled circular tube

    def __init__(self, tag, d_out, t, alpha_v=None, rho=0.0, default_alpha_v=False):
        if d_out <= 0:
            raise ValueError(f"Outer diameter must be positive, got {d_out}")
        if t <= 0 or t > d_out / 2:
            raise ValueError(f"Wall thickness must be in (0, d_out/2], got {t}")
        if rho < 0:
            raise ValueError(f"Mass per length must be non-negative, got {rho}")

        if alpha_v is None:
            alpha_v = self.DEFAULT_ALPHA_V if default_alpha_v else self.SHEAR_RIGID
        if alpha_v <= 0:
            raise ValueError(f"Shear area factor must be positive, got {alpha_v}")

        self.tag = tag
        self.d_out = float(d_out)
        self.t = float(t)
        self.alpha_v = float(alpha_v)
        self.rho = float(rho)

    def copy(self):
        return deepcopy(self)

    @property
    def d_in(self):
        return self.d_out - 2 * self.t

    def area(self):
        return np.pi / 4 * (self.d_out ** 2 - self.d_in ** 2)

    def iy(self):
        return np.pi / 64 * (self.d_out ** 4 - self.d_in ** 4)

    def iz(self):
        return self.iy()

    def torsion_constant(self):
        return self.iy() + self.iz()

    def wall_thickness(self):
        return self.t

    def outer_diameter(self):
        return self.d_out

    def shear_correction_factor(self):
        return self.alpha_v

    def mass_per_length(self):
        return self.rho

    def __repr__(self):
        return f"<PipeSection tag={self.tag} d_out={self.d_out} t={self.t}>"
