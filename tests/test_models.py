import numpy as np
import pytest

from tonecolor.color import (
    LMS_TO_XYZ_BRADFORD,
    LMS_TO_XYZ_CAT02,
    XYZ_TO_LMS_BRADFORD,
    XYZ_TO_LMS_CAT02,
)
from tonecolor.errors import ToneColorError, UnknownAdaptationTransformError
from tonecolor.models import (
    ADAPTATION_TRANSFORMS,
    DEFAULT_ADAPTATION,
    ChromaticAdaptationTransform,
    get_adaptation_transform,
)


def test_registry_contents():
    assert set(ADAPTATION_TRANSFORMS) == {"cat02", "bradford"}
    assert DEFAULT_ADAPTATION in ADAPTATION_TRANSFORMS


def test_cat02_uses_constant_matrices():
    cat02 = ADAPTATION_TRANSFORMS["cat02"]
    assert cat02.name == "CAT02"
    assert np.array_equal(cat02.xyz_to_lms, XYZ_TO_LMS_CAT02)
    assert np.array_equal(cat02.lms_to_xyz, LMS_TO_XYZ_CAT02)


def test_bradford_uses_constant_matrices():
    bradford = ADAPTATION_TRANSFORMS["bradford"]
    assert bradford.name == "Bradford"
    assert np.array_equal(bradford.xyz_to_lms, XYZ_TO_LMS_BRADFORD)
    assert np.array_equal(bradford.lms_to_xyz, LMS_TO_XYZ_BRADFORD)


def test_all_transforms_are_invertible():
    for key, transform in ADAPTATION_TRANSFORMS.items():
        product = transform.lms_to_xyz @ transform.xyz_to_lms
        assert np.allclose(product, np.eye(3), atol=1e-4), key


def test_transform_is_frozen():
    cat02 = ADAPTATION_TRANSFORMS["cat02"]
    with pytest.raises(AttributeError):
        cat02.name = "other"


def test_transform_rejects_bad_shape():
    with pytest.raises(ValueError):
        ChromaticAdaptationTransform(
            name="broken", xyz_to_lms=np.eye(2), lms_to_xyz=np.eye(3)
        )


def test_get_adaptation_transform_case_insensitive():
    assert get_adaptation_transform("CAT02") is ADAPTATION_TRANSFORMS["cat02"]
    assert get_adaptation_transform("Bradford") is ADAPTATION_TRANSFORMS["bradford"]


def test_get_adaptation_transform_passes_instances_through():
    transform = ADAPTATION_TRANSFORMS["bradford"]
    assert get_adaptation_transform(transform) is transform


def test_get_adaptation_transform_unknown():
    with pytest.raises(UnknownAdaptationTransformError) as exc_info:
        get_adaptation_transform("von-kries")

    error = exc_info.value
    assert isinstance(error, ToneColorError)
    assert error.message == "Unknown chromatic adaptation transform: 'von-kries'"
    assert "Available transforms: bradford, cat02" in error.suggestions


def test_transform_matrices_are_read_only_copies():
    xyz_to_lms = np.eye(3)
    lms_to_xyz = np.eye(3)
    transform = ChromaticAdaptationTransform(
        name="XYZ scaling", xyz_to_lms=xyz_to_lms, lms_to_xyz=lms_to_xyz
    )

    assert transform.xyz_to_lms.dtype == np.float32
    assert transform.lms_to_xyz.dtype == np.float32
    with pytest.raises(ValueError):
        transform.xyz_to_lms[0, 0] = 2.0
    with pytest.raises(ValueError):
        transform.lms_to_xyz[0, 0] = 2.0

    xyz_to_lms[0, 0] = 2.0
    assert transform.xyz_to_lms[0, 0] == 1.0


def test_transform_accepts_nested_lists():
    rows = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    transform = ChromaticAdaptationTransform(
        name="XYZ scaling", xyz_to_lms=rows, lms_to_xyz=rows
    )
    assert np.array_equal(transform.xyz_to_lms, np.eye(3))


@pytest.mark.parametrize("adaptation", [None, 2, np.eye(3)])
def test_get_adaptation_transform_rejects_non_strings(adaptation):
    with pytest.raises(UnknownAdaptationTransformError) as exc_info:
        get_adaptation_transform(adaptation)

    assert "Available transforms: bradford, cat02" in exc_info.value.suggestions
