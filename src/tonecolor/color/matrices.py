"""Constant 3x3 color transform matrices.

Rec.709 RGB uses the ITU-R BT.709 primaries with a D65 white point. All
matrices are stored row-major and act on column vectors: ``M @ c``.

The "to" and "from" matrix of each pair are numerical inverses of one
another.
"""

import numpy as np


def _constant(rows: list[list[float]]) -> np.ndarray:
    """Build a read-only float32 matrix."""
    matrix = np.array(rows, dtype=np.float32)
    matrix.flags.writeable = False
    return matrix


# RGB Rec.709 to CIE XYZ (derived from primaries and D65 white point)
RGB_TO_XYZ_REC709 = _constant(
    [
        [0.4123907992659595, 0.3575843393838780, 0.1804807884018343],
        [0.2126390058715104, 0.7151686787677559, 0.0721923153607337],
        [0.0193308187155918, 0.1191947797946259, 0.9505321522496608],
    ]
)

XYZ_TO_RGB_REC709 = _constant(
    [
        [3.2409699419045213, -1.5373831775700935, -0.4986107602930033],
        [-0.9692436362808798, 1.8759675015077206, 0.0415550574071756],
        [0.0556300796969936, -0.2039769588889765, 1.0569715142428784],
    ]
)

# CIE XYZ to LMS using the CAT02 transform (CIECAM02)
XYZ_TO_LMS_CAT02 = _constant(
    [
        [0.7328, 0.4296, -0.1624],
        [-0.7036, 1.6975, 0.0061],
        [0.0030, 0.0136, 0.9834],
    ]
)

LMS_TO_XYZ_CAT02 = _constant(
    [
        [1.096123820835514, -0.278869000218287, 0.182745179382773],
        [0.454369041975359, 0.473533154307412, 0.072097803717229],
        [-0.009627608738429, -0.005698031216113, 1.015325639954543],
    ]
)

# CIE XYZ to LMS using the Bradford transform (CIECAM97)
XYZ_TO_LMS_BRADFORD = _constant(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]
)

LMS_TO_XYZ_BRADFORD = _constant(
    [
        [0.98699290546671214, -0.14705425642099013, 0.15996265166373122],
        [0.43230526972339445, 0.51836027153677744, 0.04929122821285559],
        [-0.00852866457517732, 0.04004282165408486, 0.96848669578754998],
    ]
)
