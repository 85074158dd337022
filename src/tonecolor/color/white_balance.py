"""White balance matrices for linear RGB in Rec.709."""

import logging
from functools import lru_cache

import numpy as np

from ..models.adaptation import (
    ADAPTATION_TRANSFORMS,
    DEFAULT_ADAPTATION,
    ChromaticAdaptationTransform,
    get_adaptation_transform,
)
from .matrices import RGB_TO_XYZ_REC709, XYZ_TO_RGB_REC709
from .temperature import color_temperature_to_xyz

logger = logging.getLogger(__name__)

# Illuminant assumed for rendered content; preserved exactly by the transform.
REFERENCE_WHITE_TEMPERATURE_K = 6500.0


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def _adaptation_matrices(
    transform: ChromaticAdaptationTransform,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Compute RGB->LMS, LMS->RGB and the reference white in LMS."""
    logger.debug("Computing %s adaptation matrices", transform.name)

    lms_from_rgb = transform.xyz_to_lms @ RGB_TO_XYZ_REC709
    rgb_from_lms = XYZ_TO_RGB_REC709 @ transform.lms_to_xyz
    white_lms = transform.xyz_to_lms @ color_temperature_to_xyz(
        REFERENCE_WHITE_TEMPERATURE_K
    )

    return (
        _read_only(lms_from_rgb),
        _read_only(rgb_from_lms),
        _read_only(white_lms),
    )


@lru_cache(maxsize=None)
def _registered_adaptation_matrices(
    key: str,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Adaptation matrices for a registry entry, computed once per key."""
    return _adaptation_matrices(ADAPTATION_TRANSFORMS[key])


def calculate_white_balance_transform_rgb_rec709(
    T: float,
    adaptation: str | ChromaticAdaptationTransform = DEFAULT_ADAPTATION,
) -> np.ndarray:
    """Calculate the matrix that white balances Rec.709 RGB to temperature T.

    Uses the von Kries transform, i.e. a diagonal scaling matrix in LMS
    space. Content is assumed to be lit by a 6500K illuminant, so the
    matrix is the identity at T = 6500K.

    The transformed RGB can be out of gamut (negative components are
    possible) depending on T; gamut clamping is left to the caller. A T
    outside [1667K, 25000K] gives a zero source white and the matrix is
    filled with inf/nan.

    Args:
        T: Target color temperature in Kelvin
        adaptation: LMS space used for the scaling, "cat02" or "bradford"
            (or a ChromaticAdaptationTransform)

    Returns:
        np.ndarray: 3x3 matrix M transforming linear RGB with c' = M @ c

    Raises:
        UnknownAdaptationTransformError: If adaptation is not registered
    """
    transform = get_adaptation_transform(adaptation)
    if isinstance(adaptation, str):
        matrices = _registered_adaptation_matrices(adaptation.lower())
    else:
        matrices = _adaptation_matrices(transform)
    lms_from_rgb, rgb_from_lms, wd = matrices

    ws = transform.xyz_to_lms @ color_temperature_to_xyz(T)

    scale = wd / ws
    D = np.diag(scale)

    return rgb_from_lms @ D @ lms_from_rgb
