# attachment_validations/mixins.py
from django.core.exceptions import ImproperlyConfigured, ValidationError

from .validators.base import BaseAttachmentValidator


def run_validators(record, attribute, value, validators) -> list:
    """Run every validator and collect all of their errors."""
    errors = []
    for validator in validators:
        try:
            validator.validate(record, attribute, value)
        except ValidationError as e:
            errors.extend(e.error_list)
    return errors


class AttachmentValidationsMixin:
    """
    Declare attachment validators on a model:

        class Profile(AttachmentValidationsMixin, models.Model):
            avatar = models.ImageField(upload_to="avatars/", blank=True)

            attachment_validators = {
                "avatar": [
                    ContentTypeValidator(["png", "jpg"]),
                    DimensionValidator(width={"min": 200}, height={"min": 200}),
                ],
            }

    Keys may also name plain attributes or properties returning a list of
    files. Validation runs from ``full_clean()`` (and so from ModelForms),
    next to the field validators.
    """

    attachment_validators = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__.get("attachment_validators")
        if declared is None:
            return
        if not isinstance(declared, dict):
            raise ImproperlyConfigured(
                f"{cls.__name__}.attachment_validators must be a dict of attribute -> validators"
            )
        for attribute, validators in declared.items():
            if not isinstance(validators, (list, tuple)) or not all(
                isinstance(v, BaseAttachmentValidator) for v in validators
            ):
                raise ImproperlyConfigured(
                    f"{cls.__name__}.attachment_validators[{attribute!r}] must be a list of attachment validators"
                )

    def clean_fields(self, exclude=None):
        errors = {}
        try:
            super().clean_fields(exclude=exclude)
        except ValidationError as e:
            errors = e.update_error_dict(errors)
        try:
            self.validate_attachments(exclude=exclude)
        except ValidationError as e:
            errors = e.update_error_dict(errors)
        if errors:
            raise ValidationError(errors)

    def validate_attachments(self, exclude=None):
        errors = {}
        for attribute, validators in self.attachment_validators.items():
            if exclude and attribute in exclude:
                continue
            messages = run_validators(self, attribute, getattr(self, attribute), validators)
            if messages:
                errors[attribute] = messages
        if errors:
            raise ValidationError(errors)
