# attachment_validations/validators/presence.py
from django.core.exceptions import ImproperlyConfigured
from django.utils.deconstruct import deconstructible

from ..options import is_number_or_deferred, parse_optional
from ..utils.images import is_processable_image
from .base import BaseAttachmentValidator


@deconstructible
class AttachedValidator(BaseAttachmentValidator):
    skip_blank = False

    def validate_each(self, record, attribute, files, errors):
        if not files:
            self.add_error(errors, "blank")


@deconstructible
class LimitValidator(BaseAttachmentValidator):
    """Number of attached files, e.g. ``LimitValidator(min=1, max=3)``."""

    skip_blank = False

    def __init__(self, *, min=None, max=None, **kwargs):
        self.min = min
        self.max = max
        super().__init__(**kwargs)
        self.min_option = parse_optional(min)
        self.max_option = parse_optional(max)

    def check_validity(self):
        if self.min is None and self.max is None:
            raise ImproperlyConfigured("You must pass either min or max to the validator")
        for bound in ("min", "max"):
            value = getattr(self, bound)
            if value is not None and not is_number_or_deferred(value):
                raise ImproperlyConfigured("{'%s': value} value must be a number" % bound)
        if (
            isinstance(self.min, int)
            and isinstance(self.max, int)
            and self.min > self.max
        ):
            raise ImproperlyConfigured("min must not be greater than max")

    def validate_each(self, record, attribute, files, errors):
        low = self.min_option.resolve(record) if self.min_option is not None else None
        high = self.max_option.resolve(record) if self.max_option is not None else None
        count = len(files)
        if (low is not None and count < low) or (high is not None and count > high):
            if low is None:
                message_key = "limit_out_of_range_max"
            elif high is None:
                message_key = "limit_out_of_range_min"
            else:
                message_key = None
            self.add_error(
                errors, "limit_out_of_range", message_key=message_key, min=low, max=high, count=count
            )


@deconstructible
class ProcessableImageValidator(BaseAttachmentValidator):
    """Pillow must be able to open and verify the file."""

    def validate_file(self, record, django_file, errors):
        if not is_processable_image(django_file):
            self.add_error(errors, "image_not_processable", django_file)
