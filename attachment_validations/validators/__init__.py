from .aspect_ratio import AspectRatioValidator
from .base import BaseAttachmentValidator
from .content_type import ContentTypeValidator
from .dimension import DimensionValidator
from .presence import AttachedValidator, LimitValidator, ProcessableImageValidator
from .size import SizeValidator, TotalSizeValidator

__all__ = [
    "AspectRatioValidator",
    "AttachedValidator",
    "BaseAttachmentValidator",
    "ContentTypeValidator",
    "DimensionValidator",
    "LimitValidator",
    "ProcessableImageValidator",
    "SizeValidator",
    "TotalSizeValidator",
]
