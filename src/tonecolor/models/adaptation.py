from dataclasses import dataclass

import numpy as np

from ..color.matrices import (
    LMS_TO_XYZ_BRADFORD,
    LMS_TO_XYZ_CAT02,
    XYZ_TO_LMS_BRADFORD,
    XYZ_TO_LMS_CAT02,
)
from ..errors import UnknownAdaptationTransformError


# ndarray fields: instances compare and hash by identity.
@dataclass(frozen=True, eq=False)
class ChromaticAdaptationTransform:
    name: str
    xyz_to_lms: np.ndarray
    lms_to_xyz: np.ndarray

    def __post_init__(self):
        for field_name in ("xyz_to_lms", "lms_to_xyz"):
            matrix = np.array(getattr(self, field_name), dtype=np.float32)
            if matrix.shape != (3, 3):
                raise ValueError(f"{field_name} must have shape (3, 3)")
            matrix.flags.writeable = False
            object.__setattr__(self, field_name, matrix)


DEFAULT_ADAPTATION = "cat02"

ADAPTATION_TRANSFORMS = {
    "cat02": ChromaticAdaptationTransform(
        name="CAT02",
        xyz_to_lms=XYZ_TO_LMS_CAT02,
        lms_to_xyz=LMS_TO_XYZ_CAT02,
    ),
    "bradford": ChromaticAdaptationTransform(
        name="Bradford",
        xyz_to_lms=XYZ_TO_LMS_BRADFORD,
        lms_to_xyz=LMS_TO_XYZ_BRADFORD,
    ),
}


def get_adaptation_transform(
    adaptation: str | ChromaticAdaptationTransform,
) -> ChromaticAdaptationTransform:
    """Resolve a chromatic adaptation transform.

    Args:
        adaptation: Registry key (case-insensitive) or a transform instance

    Returns:
        The matching ChromaticAdaptationTransform

    Raises:
        UnknownAdaptationTransformError: If the key is not registered, or
            adaptation is neither a string nor a transform
    """
    if isinstance(adaptation, ChromaticAdaptationTransform):
        return adaptation

    if not isinstance(adaptation, str):
        raise UnknownAdaptationTransformError(
            repr(adaptation), list(ADAPTATION_TRANSFORMS.keys())
        )

    transform = ADAPTATION_TRANSFORMS.get(adaptation.lower())
    if transform is None:
        raise UnknownAdaptationTransformError(
            adaptation, list(ADAPTATION_TRANSFORMS.keys())
        )

    return transform
