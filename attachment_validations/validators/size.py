# attachment_validations/validators/size.py
from django.core.exceptions import ImproperlyConfigured
from django.template.defaultfilters import filesizeformat
from django.utils.deconstruct import deconstructible

from ..options import Option, is_bounds_or_deferred, is_number_or_deferred, resolve_bounds
from .base import BaseAttachmentValidator

SIZE_OPTIONS = (
    "less_than",
    "less_than_or_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "between",
)


def _human(size):
    return filesizeformat(size) if size is not None else None


class BaseSizeValidator(BaseAttachmentValidator):
    error_prefix = None

    def __init__(
        self,
        *,
        less_than=None,
        less_than_or_equal_to=None,
        greater_than=None,
        greater_than_or_equal_to=None,
        between=None,
        **kwargs,
    ):
        self.less_than = less_than
        self.less_than_or_equal_to = less_than_or_equal_to
        self.greater_than = greater_than
        self.greater_than_or_equal_to = greater_than_or_equal_to
        self.between = between
        super().__init__(**kwargs)
        self.option_name = next(name for name in SIZE_OPTIONS if getattr(self, name) is not None)
        self.option = Option.parse(getattr(self, self.option_name))

    def check_validity(self):
        given = [name for name in SIZE_OPTIONS if getattr(self, name) is not None]
        if len(given) != 1:
            raise ImproperlyConfigured(
                "You must pass exactly one of %s to the validator" % ", ".join(SIZE_OPTIONS)
            )
        name = given[0]
        value = getattr(self, name)
        if name == "between":
            if not is_bounds_or_deferred(value):
                raise ImproperlyConfigured("{'between': value} value must be a (min, max) tuple")
        elif not is_number_or_deferred(value):
            raise ImproperlyConfigured("{'%s': value} value must be a number" % name)

    def bounds(self, record):
        """(min, max) for the declared option, one side possibly None."""
        if self.option_name == "between":
            return resolve_bounds(self.option, record)
        value = self.option.resolve(record)
        if self.option_name.startswith("less_than"):
            return None, value
        return value, None

    def is_valid_size(self, size, low, high) -> bool:
        name = self.option_name
        if name == "less_than":
            return size < high
        if name == "less_than_or_equal_to":
            return size <= high
        if name == "greater_than":
            return size > low
        if name == "greater_than_or_equal_to":
            return size >= low
        return low <= size <= high

    def check_size(self, record, size, errors, django_file=None, size_param="file_size"):
        low, high = self.bounds(record)
        if self.is_valid_size(size, low, high):
            return
        params = {size_param: _human(size), "min": _human(low), "max": _human(high)}
        self.add_error(errors, f"{self.error_prefix}_not_{self.option_name}", django_file, **params)


@deconstructible
class SizeValidator(BaseSizeValidator):
    """Size of every attached file, e.g. ``SizeValidator(less_than=5 * 1024 * 1024)``."""

    error_prefix = "file_size"

    def validate_file(self, record, django_file, errors):
        self.check_size(record, django_file.size, errors, django_file)


@deconstructible
class TotalSizeValidator(BaseSizeValidator):
    """Summed size of all the files of a multi-file value."""

    error_prefix = "total_file_size"

    def validate_each(self, record, attribute, files, errors):
        total = sum(f.size for f in files)
        self.check_size(record, total, errors, size_param="total_file_size")
