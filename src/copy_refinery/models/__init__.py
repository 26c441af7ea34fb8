"""Data models for the copy refinery relay."""

from copy_refinery.models.actions import Action, PromptKind
from copy_refinery.models.registry import (
    DEFAULT_MODEL_ID,
    MODEL_REGISTRY,
    ModelInfo,
    ModelSelection,
)
from copy_refinery.models.transform import (
    ConnectionStatus,
    StyleGuide,
    StyleGuideResult,
    TransformOptions,
    TransformRequest,
    TransformResult,
    Usage,
)

__all__ = [
    "Action",
    "ConnectionStatus",
    "DEFAULT_MODEL_ID",
    "MODEL_REGISTRY",
    "ModelInfo",
    "ModelSelection",
    "PromptKind",
    "StyleGuide",
    "StyleGuideResult",
    "TransformOptions",
    "TransformRequest",
    "TransformResult",
    "Usage",
]
