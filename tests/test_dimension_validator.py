import re
from types import SimpleNamespace

import pytest
from django.core.exceptions import ImproperlyConfigured, ValidationError

from attachment_validations import DimensionValidator
from tests.files import empty_file, image_file, pdf_file
from tests.helpers import codes, validation_errors

AXES = ["width", "height"]
VALUE_TYPES = ["value", "proc"]


def declared(value_type, value):
    return value if value_type == "value" else (lambda record: value)


class TestCheckValidity:
    @pytest.mark.parametrize("axis", AXES)
    def test_in_accepts_a_tuple(self, axis):
        DimensionValidator(**{axis: {"in": (400, 600)}})

    @pytest.mark.parametrize("axis", AXES)
    def test_in_accepts_a_callable(self, axis):
        DimensionValidator(**{axis: {"in": lambda record: (400, 600)}})

    def test_in_rejects_anything_else(self):
        message = "{'width': {'in': value}} value must be a (min, max) tuple"
        with pytest.raises(ImproperlyConfigured, match=re.escape(message)):
            DimensionValidator(width={"in": 500})

    @pytest.mark.parametrize("bound", ["min", "max"])
    def test_symmetric_bound_accepts_a_tuple(self, bound):
        DimensionValidator(**{bound: (500, 500)})

    @pytest.mark.parametrize("bound", ["min", "max"])
    def test_symmetric_bound_accepts_a_callable(self, bound):
        DimensionValidator(**{bound: lambda record: (500, 500)})

    @pytest.mark.parametrize("bound", ["min", "max"])
    def test_symmetric_bound_rejects_a_bare_number(self, bound):
        message = f"{{'{bound}': value}} value must be a ({bound}_width, {bound}_height) tuple"
        with pytest.raises(ImproperlyConfigured, match=re.escape(message)):
            DimensionValidator(**{bound: 500})

    def test_requires_at_least_one_option(self):
        with pytest.raises(ImproperlyConfigured, match="width, height, min or max"):
            DimensionValidator()

    def test_rejects_unknown_axis_keys(self):
        with pytest.raises(ImproperlyConfigured):
            DimensionValidator(width={"minimum": 5})

    def test_rejects_in_combined_with_min(self):
        with pytest.raises(ImproperlyConfigured):
            DimensionValidator(height={"in": (1, 2), "min": 1})

    def test_rejects_non_numeric_exact_value(self):
        with pytest.raises(ImproperlyConfigured):
            DimensionValidator(width="500")

    def test_check_runs_without_any_record(self):
        calls = []
        DimensionValidator(width=lambda record: calls.append(record) or 500)
        assert calls == []


@pytest.mark.parametrize("value_type", VALUE_TYPES)
@pytest.mark.parametrize("axis", AXES)
class TestAxisOptions:
    def test_exact_lower(self, axis, value_type):
        option = declared(value_type, 500)
        errors = validation_errors(DimensionValidator(**{axis: option}), image_file(150, 150))
        assert codes(errors) == [f"dimension_{axis}_not_equal_to"]
        assert errors[0].params == {"length": 500, axis: option, "filename": "image_150x150_file.png"}

    def test_exact_same(self, axis, value_type):
        validator = DimensionValidator(**{axis: declared(value_type, 500)})
        assert validation_errors(validator, image_file(500, 500)) == []

    def test_exact_higher(self, axis, value_type):
        option = declared(value_type, 500)
        errors = validation_errors(DimensionValidator(**{axis: option}), image_file(600, 800))
        assert codes(errors) == [f"dimension_{axis}_not_equal_to"]
        assert errors[0].params == {"length": 500, axis: option, "filename": "image_600x800_file.png"}

    def test_min(self, axis, value_type):
        option = {"min": declared(value_type, 500)}
        validator = DimensionValidator(**{axis: option})

        errors = validation_errors(validator, image_file(150, 150))
        assert codes(errors) == [f"dimension_{axis}_not_greater_than_or_equal_to"]
        assert errors[0].params == {"length": 500, axis: option, "filename": "image_150x150_file.png"}

        assert validation_errors(validator, image_file(500, 500)) == []
        assert validation_errors(validator, image_file(600, 800)) == []

    def test_max(self, axis, value_type):
        option = {"max": declared(value_type, 500)}
        validator = DimensionValidator(**{axis: option})

        assert validation_errors(validator, image_file(150, 150)) == []
        assert validation_errors(validator, image_file(500, 500)) == []

        errors = validation_errors(validator, image_file(600, 800))
        assert codes(errors) == [f"dimension_{axis}_not_less_than_or_equal_to"]
        assert errors[0].params == {"length": 500, axis: option, "filename": "image_600x800_file.png"}

    def test_min_and_max(self, axis, value_type):
        option = {"min": declared(value_type, 400), "max": declared(value_type, 600)}
        validator = DimensionValidator(**{axis: option})

        errors = validation_errors(validator, image_file(150, 150))
        assert codes(errors) == [f"dimension_{axis}_not_greater_than_or_equal_to"]
        assert errors[0].params == {"length": 400, axis: option, "filename": "image_150x150_file.png"}

        assert validation_errors(validator, image_file(500, 500)) == []

        errors = validation_errors(validator, image_file(1200, 900))
        assert codes(errors) == [f"dimension_{axis}_not_less_than_or_equal_to"]
        assert errors[0].params == {"length": 600, axis: option, "filename": "image_1200x900_file.png"}

    def test_in(self, axis, value_type):
        option = {"in": declared(value_type, (400, 600))}
        validator = DimensionValidator(**{axis: option})

        for width, height in [(150, 150), (1200, 900)]:
            errors = validation_errors(validator, image_file(width, height))
            assert codes(errors) == [f"dimension_{axis}_not_included_in"]
            assert errors[0].params == {
                axis: option,
                "min": 400,
                "max": 600,
                "filename": f"image_{width}x{height}_file.png",
            }

        assert validation_errors(validator, image_file(500, 500)) == []

    def test_in_bounds_are_inclusive(self, axis, value_type):
        validator = DimensionValidator(**{axis: {"in": declared(value_type, (500, 600))}})
        assert validation_errors(validator, image_file(500, 500)) == []
        assert validation_errors(validator, image_file(600, 600)) == []


@pytest.mark.parametrize("value_type", VALUE_TYPES)
class TestSymmetricOptions:
    def test_min(self, value_type):
        validator = DimensionValidator(min=declared(value_type, (500, 500)))

        errors = validation_errors(validator, image_file(150, 150))
        assert codes(errors) == ["dimension_min_not_included_in"]
        assert errors[0].params == {"width": 500, "height": 500, "filename": "image_150x150_file.png"}

        assert validation_errors(validator, image_file(500, 500)) == []
        assert validation_errors(validator, image_file(600, 800)) == []

    def test_max(self, value_type):
        validator = DimensionValidator(max=declared(value_type, (500, 500)))

        assert validation_errors(validator, image_file(150, 150)) == []
        assert validation_errors(validator, image_file(500, 500)) == []

        errors = validation_errors(validator, image_file(600, 800))
        assert codes(errors) == ["dimension_max_not_included_in"]
        assert errors[0].params == {"width": 500, "height": 500, "filename": "image_600x800_file.png"}

    def test_min_checks_width_and_height_separately(self, value_type):
        validator = DimensionValidator(min=declared(value_type, (100, 700)))
        assert codes(validation_errors(validator, image_file(600, 600))) == ["dimension_min_not_included_in"]


class TestCombinedAxes:
    def test_exact_width_and_height(self):
        validator = DimensionValidator(width=600, height=600)
        assert validation_errors(validator, image_file(600, 600)) == []

        errors = validation_errors(validator, image_file(800, 600))
        assert codes(errors) == ["dimension_width_not_equal_to"]
        assert errors[0].params == {
            "width": 600,
            "height": 600,
            "length": 600,
            "filename": "image_800x600_file.png",
        }

        errors = validation_errors(validator, image_file(600, 800))
        assert codes(errors) == ["dimension_height_not_equal_to"]

        errors = validation_errors(validator, image_file(1200, 900))
        assert codes(errors) == ["dimension_width_not_equal_to", "dimension_height_not_equal_to"]
        assert all(e.params["length"] == 600 for e in errors)

    def test_in_width_and_height(self):
        validator = DimensionValidator(width={"in": (550, 750)}, height={"in": (550, 750)})
        expected = {
            "width": {"in": (550, 750)},
            "height": {"in": (550, 750)},
            "min": 550,
            "max": 750,
        }

        assert validation_errors(validator, image_file(600, 600)) == []

        errors = validation_errors(validator, image_file(500, 700))
        assert codes(errors) == ["dimension_width_not_included_in"]
        assert errors[0].params == {**expected, "filename": "image_500x700_file.png"}

        errors = validation_errors(validator, image_file(700, 500))
        assert codes(errors) == ["dimension_height_not_included_in"]

        errors = validation_errors(validator, image_file(500, 500))
        assert codes(errors) == ["dimension_width_not_included_in", "dimension_height_not_included_in"]
        assert all(e.params == {**expected, "filename": "image_500x500_file.png"} for e in errors)

    def test_every_file_of_a_list_is_checked(self):
        validator = DimensionValidator(width=500)
        errors = validation_errors(validator, [image_file(500, 500), image_file(150, 150), image_file(600, 800)])
        assert [e.params["filename"] for e in errors] == ["image_150x150_file.png", "image_600x800_file.png"]


class TestEdgeCases:
    def test_invalid_media_only_reports_missing_metadata(self):
        validator = DimensionValidator(width=150, height={"min": 10}, min=(1, 1))
        errors = validation_errors(validator, empty_file())
        assert codes(errors) == ["media_metadata_missing"]
        assert errors[0].params == {"filename": "empty_io_file.txt"}

    def test_valid_pdf(self):
        validator = DimensionValidator(width=150, height=150)
        assert validation_errors(validator, pdf_file(150, 150)) == []

    def test_invalid_pdf(self):
        validator = DimensionValidator(width=150, height=150)
        errors = validation_errors(validator, pdf_file(200, 300))
        assert codes(errors) == ["dimension_width_not_equal_to", "dimension_height_not_equal_to"]
        assert errors[0].params == {"length": 150, "width": 150, "height": 150, "filename": "pdf_200x300_file.pdf"}

    def test_exif_rotation_swaps_dimensions(self):
        validator = DimensionValidator(width=100, height=300)
        rotated = image_file(300, 100, fmt="JPEG", orientation=6)
        assert validation_errors(validator, rotated) == []

    def test_blank_value_is_skipped(self):
        assert validation_errors(DimensionValidator(width=500), None) == []
        assert validation_errors(DimensionValidator(width=500), []) == []

    def test_validating_twice_gives_the_same_errors(self):
        validator = DimensionValidator(width={"min": 400, "max": 600}, height=500)
        upload = image_file(1200, 900)
        first = validation_errors(validator, upload)
        second = validation_errors(validator, upload)
        assert [(e.code, e.params) for e in first] == [(e.code, e.params) for e in second]

    def test_callable_matches_literal(self):
        literal = DimensionValidator(width={"min": 400, "max": 600}, height={"in": (100, 200)})
        deferred = DimensionValidator(
            width={"min": lambda r: 400, "max": lambda r: 600},
            height={"in": lambda r: (100, 200)},
        )
        for size in [(150, 150), (500, 150), (1200, 900)]:
            assert codes(validation_errors(literal, image_file(*size))) == codes(
                validation_errors(deferred, image_file(*size))
            )

    def test_callable_receives_the_record(self):
        validator = DimensionValidator(width=lambda record: record.expected_width)
        upload = image_file(150, 150)
        assert validation_errors(validator, upload, record=SimpleNamespace(expected_width=150)) == []
        errors = validation_errors(validator, upload, record=SimpleNamespace(expected_width=300))
        assert errors[0].params["length"] == 300

    def test_condition_skips_validation(self):
        validator = DimensionValidator(width=500, condition=lambda record: record.strict)
        upload = image_file(150, 150)
        assert validation_errors(validator, upload, record=SimpleNamespace(strict=False)) == []
        assert validation_errors(validator, upload, record=SimpleNamespace(strict=True)) != []

    def test_condition_is_ignored_as_a_field_validator(self):
        validator = DimensionValidator(width=500, condition=lambda record: record.strict)
        with pytest.raises(ValidationError) as excinfo:
            validator(image_file(150, 150))
        assert [e.code for e in excinfo.value.error_list] == ["dimension_width_not_equal_to"]

    def test_custom_message(self):
        validator = DimensionValidator(width=500, message="Banner must be %(length)s px wide")
        errors = validation_errors(validator, image_file(150, 150))
        assert errors[0].code == "dimension_width_not_equal_to"
        assert ValidationError(errors).messages == ["Banner must be 500 px wide"]

    def test_works_as_a_field_validator(self):
        with pytest.raises(ValidationError) as excinfo:
            DimensionValidator(width=500)(image_file(150, 150))
        assert excinfo.value.error_list[0].code == "dimension_width_not_equal_to"

    def test_equality_and_deconstruct(self):
        assert DimensionValidator(width=500) == DimensionValidator(width=500)
        assert DimensionValidator(width=500) != DimensionValidator(width=400)
        path, args, kwargs = DimensionValidator(width=500).deconstruct()
        assert path.endswith("DimensionValidator")
        assert kwargs == {"width": 500}
