"""RGB Rec.709, CIE XYZ and xyY conversions."""

import colour
import numpy as np

from .matrices import RGB_TO_XYZ_REC709, XYZ_TO_RGB_REC709


def as_tristimulus(c) -> np.ndarray:
    """Coerce an array-like into a float32 tristimulus vector.

    Args:
        c: Sequence or array with exactly three components

    Returns:
        np.ndarray: float32 array of shape (3,)

    Raises:
        ValueError: If c does not have exactly three components
    """
    vector = np.asarray(c, dtype=np.float32)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {vector.shape}")
    return vector


def rgb_to_xyz_rec709(c) -> np.ndarray:
    """Transform a linear RGB color in Rec.709 to CIE XYZ.

    Args:
        c: Linear Rec.709 RGB triplet

    Returns:
        np.ndarray: XYZ tristimulus values
    """
    return RGB_TO_XYZ_REC709 @ as_tristimulus(c)


def xyz_to_rgb_rec709(c) -> np.ndarray:
    """Transform a CIE XYZ color to linear RGB in Rec.709.

    Args:
        c: XYZ tristimulus values

    Returns:
        np.ndarray: Linear Rec.709 RGB triplet (may be out of gamut)
    """
    return XYZ_TO_RGB_REC709 @ as_tristimulus(c)


def xyy_to_xyz(x: float, y: float, Y: float) -> np.ndarray:
    """Convert chromaticity coordinates and luminance to CIE XYZ.

    X = x * Y / y, Z = (1 - x - y) * Y / y

    The caller must ensure y != 0. A zero y divides by zero and the result
    contains inf or nan.

    Args:
        x: Chromaticity x
        y: Chromaticity y
        Y: Luminance

    Returns:
        np.ndarray: XYZ tristimulus values
    """
    x = np.float32(x)
    y = np.float32(y)
    Y = np.float32(Y)
    return np.array(
        [x * Y / y, Y, (np.float32(1.0) - x - y) * Y / y], dtype=np.float32
    )


def xyz_to_xyy(c) -> np.ndarray:
    """Convert CIE XYZ to chromaticity coordinates and luminance.

    Black has no defined chromaticity; its xy is left to colour-science.

    Args:
        c: XYZ tristimulus values

    Returns:
        np.ndarray: [x, y, Y]
    """
    xyY = colour.XYZ_to_xyY(as_tristimulus(c).astype(np.float64))
    return np.asarray(xyY, dtype=np.float32)


def xyz_to_correlated_color_temperature(c) -> float:
    """Estimate the correlated color temperature of an XYZ color.

    Uses McCamy's 1992 cubic approximation, which is accurate to a few
    Kelvin near the Planckian locus between roughly 2800K and 6500K.

    Args:
        c: XYZ tristimulus values with non-zero luminance

    Returns:
        float: Correlated color temperature in Kelvin
    """
    xy = colour.XYZ_to_xy(as_tristimulus(c).astype(np.float64))
    return float(colour.xy_to_CCT(xy, method="McCamy 1992"))
