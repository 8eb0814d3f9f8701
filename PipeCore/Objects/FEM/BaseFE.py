from abc import ABC, abstractmethod


# =============================================================================
# CUSTOM EXCEPTIONS AND WARNINGS
# =============================================================================

class ModelError(RuntimeError):
    """Raised when the model cannot be bound to its domain.

    This typically indicates:
    - A domain that is not three-dimensional
    - A node tag that does not exist in the domain
    - Colinear or coincident element geometry
    - A coordinate transformation that cannot be built
    """
    pass


class GeometryWarning(UserWarning):
    """Recoverable geometric inconsistency (tolerances, arc angle limit)."""
    pass


class NumericalWarning(UserWarning):
    """Recoverable numerical failure (singular flexibility, material update)."""
    pass


class BaseFE(ABC):
    """Abstract base class for finite elements."""

    @abstractmethod
    def get_class_type(self):
        pass

    @abstractmethod
    def set_domain(self, domain):
        pass

    @abstractmethod
    def get_mass(self):
        pass

    @abstractmethod
    def get_tangent_stiff(self):
        pass

    @abstractmethod
    def get_initial_stiff(self):
        pass

    @abstractmethod
    def get_resisting_force(self):
        pass

    @abstractmethod
    def zero_load(self):
        pass
