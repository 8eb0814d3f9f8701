from typing import Callable, Tuple

import numpy as np

# 20-point Gauss-Legendre rule on [-1, 1], stored as (weight, abscissa) pairs
GAUSS_20 = np.array([
    [0.1527533871307258, -0.0765265211334973],
    [0.1527533871307258, 0.0765265211334973],
    [0.1491729864726037, -0.2277858511416451],
    [0.1491729864726037, 0.2277858511416451],
    [0.1420961093183820, -0.3737060887154195],
    [0.1420961093183820, 0.3737060887154195],
    [0.1316886384491766, -0.5108670019508271],
    [0.1316886384491766, 0.5108670019508271],
    [0.1181945319615184, -0.6360536807265150],
    [0.1181945319615184, 0.6360536807265150],
    [0.1019301198172404, -0.7463319064601508],
    [0.1019301198172404, 0.7463319064601508],
    [0.0832767415767048, -0.8391169718222188],
    [0.0832767415767048, 0.8391169718222188],
    [0.0626720483341091, -0.9122344282513259],
    [0.0626720483341091, 0.9122344282513259],
    [0.0406014298003869, -0.9639719272779138],
    [0.0406014298003869, 0.9639719272779138],
    [0.0176140071391521, -0.9931285991850949],
    [0.0176140071391521, 0.9931285991850949],
])


def gauss_points_20() -> Tuple[np.ndarray, np.ndarray]:
    """
    Abscissae and weights of the 20-point Gauss-Legendre rule on [-1, 1].

    Returns
    -------
    points : np.ndarray
        Abscissae in [-1, 1]
    weights : np.ndarray
        Corresponding weights (sum to 2.0)
    """
    return GAUSS_20[:, 1].copy(), GAUSS_20[:, 0].copy()


def arc_points(a: float, b: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Map the 20-point rule onto the angular interval [a, b].

    Returns
    -------
    thetas : np.ndarray
        Angular positions of the integration points
    weights : np.ndarray
        Weights including the Jacobian (b - a) / 2

    Notes
    -----
    theta = p * xi + q with p = (b - a)/2 and q = (b + a)/2.
    """
    p = (b - a) / 2.0
    q = (b + a) / 2.0
    xi, w = gauss_points_20()
    return xi * p + q, w * p


def integrate_arc(func: Callable[[float], np.ndarray], theta0: float, radius: float):
    """
    Integrate a function of the angular position over a circular arc.

    Computes radius * ∫ f(θ) dθ over [-theta0, theta0], i.e. the integral
    with respect to arc length. `func` may return a scalar, a vector or a
    matrix; the result has the same shape.

    Parameters
    ----------
    func : callable
        f(theta), evaluated once per integration point
    theta0 : float
        Half subtended angle of the arc [rad]
    radius : float
        Arc radius

    Returns
    -------
    float or np.ndarray
        Integral of func along the arc

    Examples
    --------
    >>> # Constant integrand: exact value is 2 * theta0 * radius * c
    >>> round(float(integrate_arc(lambda t: 3.0, 0.5, 2.0)), 12)
    6.0
    """
    thetas, weights = arc_points(-theta0, theta0)

    result = None
    for theta, w in zip(thetas, weights):
        term = w * np.asarray(func(theta), dtype=float)
        result = term if result is None else result + term

    return radius * result
