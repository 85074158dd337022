from .conversions import (
    rgb_to_xyz_rec709,
    xyy_to_xyz,
    xyz_to_correlated_color_temperature,
    xyz_to_rgb_rec709,
    xyz_to_xyy,
)
from .matrices import (
    LMS_TO_XYZ_BRADFORD,
    LMS_TO_XYZ_CAT02,
    RGB_TO_XYZ_REC709,
    XYZ_TO_LMS_BRADFORD,
    XYZ_TO_LMS_CAT02,
    XYZ_TO_RGB_REC709,
)
from .temperature import (
    TEMPERATURE_MAX_K,
    TEMPERATURE_MIN_K,
    color_temperature_to_xyz,
    is_valid_color_temperature,
    planckian_locus_xy,
    validate_color_temperature,
)
from .white_balance import (
    REFERENCE_WHITE_TEMPERATURE_K,
    calculate_white_balance_transform_rgb_rec709,
)

__all__ = [
    "RGB_TO_XYZ_REC709",
    "XYZ_TO_RGB_REC709",
    "XYZ_TO_LMS_CAT02",
    "LMS_TO_XYZ_CAT02",
    "XYZ_TO_LMS_BRADFORD",
    "LMS_TO_XYZ_BRADFORD",
    "rgb_to_xyz_rec709",
    "xyz_to_rgb_rec709",
    "xyy_to_xyz",
    "xyz_to_xyy",
    "xyz_to_correlated_color_temperature",
    "TEMPERATURE_MIN_K",
    "TEMPERATURE_MAX_K",
    "is_valid_color_temperature",
    "validate_color_temperature",
    "planckian_locus_xy",
    "color_temperature_to_xyz",
    "REFERENCE_WHITE_TEMPERATURE_K",
    "calculate_white_balance_transform_rgb_rec709",
]
