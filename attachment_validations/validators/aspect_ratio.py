# attachment_validations/validators/aspect_ratio.py
import re

from django.core.exceptions import ImproperlyConfigured
from django.utils.deconstruct import deconstructible

from ..metadata import has_dimensions, metadata_for
from ..options import Option, as_list
from .base import BaseAttachmentValidator

NAMED_ASPECT_RATIOS = ("square", "portrait", "landscape")
ASPECT_RATIO_REGEX = re.compile(r"^is_(\d+)_(\d+)$")


def parse_ratio(name):
    """(x, y) for "is_x_y", else None."""
    match = ASPECT_RATIO_REGEX.match(name)
    if not match:
        return None
    x, y = int(match.group(1)), int(match.group(2))
    return (x, y) if x > 0 and y > 0 else None


def is_valid_aspect_ratio(name) -> bool:
    return isinstance(name, str) and (name in NAMED_ASPECT_RATIOS or parse_ratio(name) is not None)


def matches(name, width, height) -> bool:
    if name == "square":
        return width == height
    if name == "portrait":
        return width < height
    if name == "landscape":
        return width > height
    x, y = parse_ratio(name)
    return width * y == height * x


def human_aspect_ratio(name) -> str:
    ratio = parse_ratio(name)
    return f"{ratio[0]}:{ratio[1]}" if ratio else name


@deconstructible
class AspectRatioValidator(BaseAttachmentValidator):
    """``"square"``, ``"portrait"``, ``"landscape"``, ``"is_16_9"`` or a list of them."""

    def __init__(self, aspect_ratio, **kwargs):
        self.aspect_ratio = aspect_ratio
        super().__init__(**kwargs)
        self.option = Option.parse(aspect_ratio)

    def check_validity(self):
        if callable(self.aspect_ratio):
            return
        names = as_list(self.aspect_ratio)
        if not names or not all(is_valid_aspect_ratio(n) for n in names):
            raise ImproperlyConfigured(
                "aspect_ratio must be one of %s or 'is_x_y' (e.g. 'is_16_9'), got %r"
                % (", ".join(NAMED_ASPECT_RATIOS), self.aspect_ratio)
            )

    def validate_file(self, record, django_file, errors):
        metadata = metadata_for(django_file)
        if not has_dimensions(metadata):
            self.add_error(errors, "media_metadata_missing", django_file)
            return

        width, height = metadata["width"], metadata["height"]
        resolved = self.option.resolve(record)
        names = as_list(resolved)
        if any(matches(name, width, height) for name in names):
            return

        if isinstance(resolved, (list, tuple, set, frozenset)):
            self.add_error(
                errors, "aspect_ratio_invalid", django_file,
                width=width, height=height,
                authorized_aspect_ratios=", ".join(human_aspect_ratio(n) for n in names),
            )
        elif resolved in NAMED_ASPECT_RATIOS:
            self.add_error(
                errors, f"aspect_ratio_not_{resolved}", django_file, width=width, height=height
            )
        else:
            self.add_error(
                errors, "aspect_ratio_is_not", django_file,
                width=width, height=height, aspect_ratio=human_aspect_ratio(resolved),
            )
