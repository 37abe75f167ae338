from .mixins import AttachmentValidationsMixin, run_validators
from .validators import (
    AspectRatioValidator,
    AttachedValidator,
    ContentTypeValidator,
    DimensionValidator,
    LimitValidator,
    ProcessableImageValidator,
    SizeValidator,
    TotalSizeValidator,
)

__version__ = "0.1.0"

__all__ = [
    "AspectRatioValidator",
    "AttachedValidator",
    "AttachmentValidationsMixin",
    "ContentTypeValidator",
    "DimensionValidator",
    "LimitValidator",
    "ProcessableImageValidator",
    "SizeValidator",
    "TotalSizeValidator",
    "run_validators",
]
