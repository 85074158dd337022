from .adaptation import (
    ADAPTATION_TRANSFORMS,
    DEFAULT_ADAPTATION,
    ChromaticAdaptationTransform,
    get_adaptation_transform,
)

__all__ = [
    "ADAPTATION_TRANSFORMS",
    "DEFAULT_ADAPTATION",
    "ChromaticAdaptationTransform",
    "get_adaptation_transform",
]
