# attachment_validations/validators/base.py
from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from ..messages import message_for
from ..utils.files import attachables, filename_of


@deconstructible
class BaseAttachmentValidator:
    """
    Common plumbing of the attachment validators.

    ``validate(record, attribute, value)`` is what the model mixin calls; the
    validator can also sit in a ``FileField(validators=[...])`` list, in which
    case it is called with the value only: option callables receive ``None``
    and ``condition`` is not consulted.
    Options are checked once in ``__init__`` (``check_validity``) and raise
    ``ImproperlyConfigured`` when malformed.
    """

    # blank values are left to AttachedValidator
    skip_blank = True

    def __init__(self, *, message=None, condition=None):
        self.message = message
        self.condition = condition
        self.check_validity()

    def check_validity(self):
        pass

    def __call__(self, value):
        self.validate(None, None, value)

    def validate(self, record, attribute, value):
        if record is not None and self.condition is not None and not self.condition(record):
            return
        files = attachables(value)
        if self.skip_blank and not files:
            return
        errors = []
        self.validate_each(record, attribute, files, errors)
        if errors:
            raise ValidationError(errors)

    def validate_each(self, record, attribute, files, errors):
        for f in files:
            self.validate_file(record, f, errors)

    def validate_file(self, record, django_file, errors):
        raise NotImplementedError

    def add_error(self, errors, code, django_file=None, message_key=None, **params):
        if django_file is not None:
            params["filename"] = filename_of(django_file)
        errors.append(
            ValidationError(self.message or message_for(message_key or code), code=code, params=params)
        )

    def __eq__(self, other):
        return (
            isinstance(other, self.__class__)
            and self._constructor_args == other._constructor_args
        )
