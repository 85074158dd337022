"""Blackbody color temperature to CIE XYZ.

Approximates the Planckian locus with the piecewise rational polynomials
from Kang et al., "Design of Advanced Color Temperature Control System for
HDTV Applications", 2002.

The polynomials are evaluated in double precision. The resulting
chromaticity is rounded to float32 only after both x and y are known.
The fits are discontinuous at 2222K and 4000K; boundary values belong to
the upper branch.
"""

import logging

import numpy as np

from ..errors import TemperatureOutOfRangeError
from .conversions import xyy_to_xyz

logger = logging.getLogger(__name__)

TEMPERATURE_MIN_K = 1667.0
TEMPERATURE_MAX_K = 25000.0


def _single_precision(T: float) -> float:
    """Round T to float32, the precision range and branch tests run at."""
    return float(np.float32(T))


def is_valid_color_temperature(T: float) -> bool:
    """Return True if T lies within [TEMPERATURE_MIN_K, TEMPERATURE_MAX_K]."""
    t = _single_precision(T)
    return not (t < TEMPERATURE_MIN_K or t > TEMPERATURE_MAX_K)


def validate_color_temperature(T: float) -> float:
    """Check that a color temperature is within the supported range.

    Args:
        T: Color temperature in Kelvin

    Returns:
        float: T rounded to float32 precision

    Raises:
        TemperatureOutOfRangeError: If T is outside [1667K, 25000K]
    """
    if not is_valid_color_temperature(T):
        raise TemperatureOutOfRangeError(T, TEMPERATURE_MIN_K, TEMPERATURE_MAX_K)
    return _single_precision(T)


def planckian_locus_xy(T: float) -> tuple[float, float]:
    """Compute the chromaticity of a blackbody emitter.

    Args:
        T: Color temperature in Kelvin, within [1667K, 25000K]

    Returns:
        tuple: (x, y) chromaticity in double precision

    Raises:
        TemperatureOutOfRangeError: If T is outside the supported range
    """
    t = validate_color_temperature(T)
    t2 = t * t
    t3 = t * t * t

    if t < 4000.0:
        xc = -0.2661239e9 / t3 - 0.2343580e6 / t2 + 0.8776956e3 / t + 0.179910
    else:
        xc = -3.0258469e9 / t3 + 2.1070379e6 / t2 + 0.2226347e3 / t + 0.240390

    x = xc
    x2 = x * x
    x3 = x * x * x

    if t < 2222.0:
        yc = -1.1063814 * x3 - 1.34811020 * x2 + 2.18555832 * x - 0.20219683
    elif t < 4000.0:
        yc = -0.9549476 * x3 - 1.37418593 * x2 + 2.09137015 * x - 0.16748867
    else:
        yc = 3.0817580 * x3 - 5.87338670 * x2 + 3.75112997 * x - 0.37001483

    return xc, yc


def color_temperature_to_xyz(T: float, Y: float = 1.0) -> np.ndarray:
    """Transform the color temperature of a blackbody emitter to CIE XYZ.

    Out-of-range temperatures do not raise: the zero vector is returned so
    per-pixel and per-frame callers degrade silently. Use
    validate_color_temperature() for an explicit error.

    Args:
        T: Color temperature in Kelvin, supported range is 1667K to 25000K
        Y: Luminance

    Returns:
        np.ndarray: XYZ tristimulus values, or (0, 0, 0) if T is out of range
    """
    if not is_valid_color_temperature(T):
        logger.debug(
            "Color temperature %sK out of range [%s, %s], returning black",
            T,
            TEMPERATURE_MIN_K,
            TEMPERATURE_MAX_K,
        )
        return np.zeros(3, dtype=np.float32)

    xc, yc = planckian_locus_xy(T)

    return xyy_to_xyz(np.float32(xc), np.float32(yc), Y)
