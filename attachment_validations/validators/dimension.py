# attachment_validations/validators/dimension.py
from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.deconstruct import deconstructible

from ..metadata import has_dimensions, metadata_for
from ..options import (
    Option,
    is_bounds_or_deferred,
    is_number_or_deferred,
    parse_optional,
    resolve_bounds,
)
from .base import BaseAttachmentValidator

AXES = ("width", "height")
AXIS_KEYS = ("min", "max", "in")


@dataclass(frozen=True)
class AxisConstraint:
    """Parsed ``width=`` / ``height=`` declaration."""

    axis: str
    exact: Optional[Option] = None
    min: Optional[Option] = None
    max: Optional[Option] = None
    within: Optional[Option] = None

    @classmethod
    def parse(cls, axis, raw):
        if isinstance(raw, dict):
            return cls(
                axis,
                min=parse_optional(raw.get("min")),
                max=parse_optional(raw.get("max")),
                within=parse_optional(raw.get("in")),
            )
        return cls(axis, exact=Option.parse(raw))


def check_axis_option(axis, raw):
    if isinstance(raw, dict):
        unknown = set(raw) - set(AXIS_KEYS)
        if not raw or unknown:
            raise ImproperlyConfigured(
                "{'%s': {...}} accepts only the 'min', 'max' and 'in' keys" % axis
            )
        if "in" in raw:
            if "min" in raw or "max" in raw:
                raise ImproperlyConfigured(
                    "{'%s': {...}} cannot combine 'in' with 'min' or 'max'" % axis
                )
            if not is_bounds_or_deferred(raw["in"]):
                raise ImproperlyConfigured(
                    "{'%s': {'in': value}} value must be a (min, max) tuple" % axis
                )
        for bound in ("min", "max"):
            if bound in raw and not is_number_or_deferred(raw[bound]):
                raise ImproperlyConfigured(
                    "{'%s': {'%s': value}} value must be a number" % (axis, bound)
                )
    elif not is_number_or_deferred(raw):
        raise ImproperlyConfigured("{'%s': value} value must be a number" % axis)


@deconstructible
class DimensionValidator(BaseAttachmentValidator):
    """
    Image / PDF width and height.

        DimensionValidator(width=500)
        DimensionValidator(width={"min": 400, "max": 600}, height={"in": (300, 900)})
        DimensionValidator(min=(800, 600))    # at least 800px wide and 600px high
        DimensionValidator(width=lambda record: record.banner_width)

    Both axes are checked and every violation is reported. Files whose
    dimensions cannot be read only get ``media_metadata_missing``.
    """

    def __init__(self, *, width=None, height=None, min=None, max=None, **kwargs):
        self.width = width
        self.height = height
        self.min = min
        self.max = max
        super().__init__(**kwargs)
        self.constraints = [
            AxisConstraint.parse(axis, getattr(self, axis))
            for axis in AXES
            if getattr(self, axis) is not None
        ]
        self.min_option = parse_optional(min)
        self.max_option = parse_optional(max)

    def check_validity(self):
        if all(opt is None for opt in (self.width, self.height, self.min, self.max)):
            raise ImproperlyConfigured(
                "You must pass either width, height, min or max to the validator"
            )
        for axis in AXES:
            raw = getattr(self, axis)
            if raw is not None:
                check_axis_option(axis, raw)
        for bound in ("min", "max"):
            raw = getattr(self, bound)
            if raw is not None and not is_bounds_or_deferred(raw):
                raise ImproperlyConfigured(
                    "{'%s': value} value must be a (%s_width, %s_height) tuple"
                    % (bound, bound, bound)
                )

    def declared_axes(self) -> dict:
        return {axis: getattr(self, axis) for axis in AXES if getattr(self, axis) is not None}

    def validate_file(self, record, django_file, errors):
        metadata = metadata_for(django_file)
        if not has_dimensions(metadata):
            self.add_error(errors, "media_metadata_missing", django_file)
            return

        if self.min_option is not None:
            min_width, min_height = resolve_bounds(self.min_option, record)
            if metadata["width"] < min_width or metadata["height"] < min_height:
                self.add_error(
                    errors, "dimension_min_not_included_in", django_file,
                    width=min_width, height=min_height,
                )
        if self.max_option is not None:
            max_width, max_height = resolve_bounds(self.max_option, record)
            if metadata["width"] > max_width or metadata["height"] > max_height:
                self.add_error(
                    errors, "dimension_max_not_included_in", django_file,
                    width=max_width, height=max_height,
                )

        declared = self.declared_axes()
        for constraint in self.constraints:
            self.validate_axis(record, django_file, constraint, metadata[constraint.axis], declared, errors)

    def validate_axis(self, record, django_file, constraint, actual, declared, errors):
        axis = constraint.axis
        if constraint.exact is not None:
            target = constraint.exact.resolve(record)
            if actual != target:
                self.add_error(
                    errors, f"dimension_{axis}_not_equal_to", django_file,
                    length=target, **declared,
                )
            return

        if constraint.within is not None:
            low, high = resolve_bounds(constraint.within, record)
            if not low <= actual <= high:
                self.add_error(
                    errors, f"dimension_{axis}_not_included_in", django_file,
                    min=low, max=high, **declared,
                )
            return

        # min and max alone or together; a single violated bound is reported
        low = constraint.min.resolve(record) if constraint.min is not None else None
        high = constraint.max.resolve(record) if constraint.max is not None else None
        if low is not None and actual < low:
            self.add_error(
                errors, f"dimension_{axis}_not_greater_than_or_equal_to", django_file,
                length=low, **declared,
            )
        elif high is not None and actual > high:
            self.add_error(
                errors, f"dimension_{axis}_not_less_than_or_equal_to", django_file,
                length=high, **declared,
            )
