"""
IGRF spherical-harmonic field evaluation.

The main field is synthesised from Schmidt quasi-normalised Gauss
coefficients up to MAX_DEGREE in the geocentric spherical frame, then
rotated into the observer's local North-East-Down frame.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from geomag.models.coordinates import Position, SphericalFrame, spherical_frame
from geomag.models.model import MAX_DEGREE, Model, ModelSet
from geomag.models.synthesis import synthesize_model
from geomag.utils.time import EpochLike

logger = logging.getLogger(__name__)

EARTH_REFERENCE_RADIUS = 6371.2e3  # IGRF reference radius [m]


def legendre_index(n: int, m: int) -> int:
    """Index of (n, m) in the triangular Legendre tables."""
    return n * (n + 1) // 2 + m


def legendre_tables(cos_theta: float, sin_theta: float,
                    max_degree: int = MAX_DEGREE) -> Tuple[np.ndarray, np.ndarray]:
    """
    Schmidt quasi-normalised associated Legendre functions and their
    colatitude derivatives.

    Args:
        cos_theta: cos(colatitude)
        sin_theta: sin(colatitude)
        max_degree: Highest degree

    Returns:
        (P, dP) in triangular layout, see legendre_index
    """
    size = (max_degree + 1) * (max_degree + 2) // 2
    p = np.zeros(size)
    d_p = np.zeros(size)
    p[0] = 1.0
    d_p[0] = 0.0
    if max_degree < 1:
        return p, d_p
    p[2] = sin_theta
    d_p[2] = cos_theta

    for n in range(1, max_degree + 1):
        for m in range(n + 1):
            i = legendre_index(n, m)
            if n == m:
                if n == 1:
                    continue
                j = legendre_index(n - 1, m - 1)
                cof = np.sqrt(1.0 - 1.0 / (2 * m))
                p[i] = cof * sin_theta * p[j]
                d_p[i] = cof * (sin_theta * d_p[j] + cos_theta * p[j])
            else:
                j = legendre_index(n - 1, m)
                norm = np.sqrt(n * n - m * m)
                cof_l = (2 * n - 1) / norm
                p[i] = cof_l * cos_theta * p[j]
                d_p[i] = cof_l * (cos_theta * d_p[j] - sin_theta * p[j])
                # P(n-2, m) only exists for m <= n - 2
                if m <= n - 2:
                    k = legendre_index(n - 2, m)
                    cof_r = np.sqrt((n - 1) * (n - 1) - m * m) / norm
                    p[i] -= cof_r * p[k]
                    d_p[i] -= cof_r * d_p[k]
    return p, d_p


def spherical_field(coefficients: np.ndarray, radius: float, cos_theta: float,
                    sin_theta: float, longitude: float,
                    max_degree: int = MAX_DEGREE) -> Tuple[float, float, float]:
    """
    Evaluate the field in the geocentric spherical frame.

    Args:
        coefficients: Gauss coefficients in file order [nT]
        radius: Geocentric distance [m]
        cos_theta, sin_theta: Geocentric colatitude terms
        longitude: [rad]
        max_degree: Truncation degree

    Returns:
        (B_r, B_theta, B_phi) [nT]
    """
    m_range = np.arange(1, max_degree + 1)
    cos_phi = np.cos(m_range * longitude)  # cos(m*phi), m = 1..max_degree
    sin_phi = np.sin(m_range * longitude)

    p, d_p = legendre_tables(cos_theta, sin_theta, max_degree)

    b_r = b_t = b_p = 0.0
    scale = EARTH_REFERENCE_RADIUS / radius
    ratio = scale * scale
    c_idx = 0

    for n in range(1, max_degree + 1):
        ratio *= scale
        for m in range(n + 1):
            i = legendre_index(n, m)
            if m == 0:
                g = coefficients[c_idx]
                cof = ratio * g
                b_r += (n + 1) * cof * p[i]
                b_t -= cof * d_p[i]
                c_idx += 1
            else:
                g = coefficients[c_idx]
                h = coefficients[c_idx + 1]
                cos_m, sin_m = cos_phi[m - 1], sin_phi[m - 1]
                cof = ratio * (g * cos_m + h * sin_m)
                b_r += (n + 1) * cof * p[i]
                b_t -= cof * d_p[i]
                if sin_theta == 0.0:
                    b_p -= cos_theta * ratio * (h * cos_m - g * sin_m) * p[i]
                else:
                    b_p -= ratio * m * (h * cos_m - g * sin_m) * p[i] / sin_theta
                c_idx += 2

    return float(b_r), float(b_t), float(b_p)


def calculate_field(model: Model, position: Position) -> np.ndarray:
    """
    Magnetic flux density of a synthesised model at a position.

    Args:
        model: Coefficients valid at the position's epoch
        position: Observer position

    Returns:
        (B_N, B_E, B_D) [nT]
    """
    frame = spherical_frame(position)
    return field_in_frame(model, frame)


def field_in_frame(model: Model, frame: SphericalFrame) -> np.ndarray:
    b_r, b_t, b_p = spherical_field(model.coefficients, frame.radius, frame.cos_theta,
                                    frame.sin_theta, frame.longitude)
    return np.array([
        -b_t * frame.cos_delta - b_r * frame.sin_delta,
        b_p,
        b_t * frame.sin_delta - b_r * frame.cos_delta
    ])


class Igrf:
    """IGRF field evaluator returning flux density in nT."""

    def __init__(self, model_set: Optional[ModelSet] = None):
        """
        Initialize evaluator.

        Args:
            model_set: Coefficient snapshots, built-in IGRF-13 if omitted
        """
        self.model_set = model_set if model_set is not None else ModelSet.default()

    def synthesize(self, epoch: EpochLike) -> Model:
        """Coefficients valid at an epoch."""
        return synthesize_model(self.model_set, epoch)

    def field(self, position: Position, epoch: Optional[EpochLike] = None) -> np.ndarray:
        """
        Flux density at a position.

        Args:
            position: Observer position
            epoch: Overrides position.epoch when given

        Returns:
            (B_N, B_E, B_D) [nT]
        """
        frame = spherical_frame(position)
        model = self.synthesize(position.epoch if epoch is None else epoch)
        return field_in_frame(model, frame)

    def __call__(self, position: Position, epoch: Optional[EpochLike] = None) -> np.ndarray:
        return self.field(position, epoch)
