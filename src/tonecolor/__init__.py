"""Color-space conversions for tone mapping: Rec.709 RGB, CIE XYZ, white balance."""

__version__ = "0.1.0"

from .color import (
    LMS_TO_XYZ_BRADFORD,
    LMS_TO_XYZ_CAT02,
    RGB_TO_XYZ_REC709,
    TEMPERATURE_MAX_K,
    TEMPERATURE_MIN_K,
    XYZ_TO_LMS_BRADFORD,
    XYZ_TO_LMS_CAT02,
    XYZ_TO_RGB_REC709,
    calculate_white_balance_transform_rgb_rec709,
    color_temperature_to_xyz,
    rgb_to_xyz_rec709,
    validate_color_temperature,
    xyy_to_xyz,
    xyz_to_rgb_rec709,
)
from .errors import (
    TemperatureOutOfRangeError,
    ToneColorError,
    UnknownAdaptationTransformError,
)
from .models import ADAPTATION_TRANSFORMS, ChromaticAdaptationTransform

__all__ = [
    "__version__",
    "RGB_TO_XYZ_REC709",
    "XYZ_TO_RGB_REC709",
    "XYZ_TO_LMS_CAT02",
    "LMS_TO_XYZ_CAT02",
    "XYZ_TO_LMS_BRADFORD",
    "LMS_TO_XYZ_BRADFORD",
    "TEMPERATURE_MIN_K",
    "TEMPERATURE_MAX_K",
    "rgb_to_xyz_rec709",
    "xyz_to_rgb_rec709",
    "xyy_to_xyz",
    "color_temperature_to_xyz",
    "validate_color_temperature",
    "calculate_white_balance_transform_rgb_rec709",
    "ToneColorError",
    "TemperatureOutOfRangeError",
    "UnknownAdaptationTransformError",
    "ADAPTATION_TRANSFORMS",
    "ChromaticAdaptationTransform",
]
