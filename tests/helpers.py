from django.core.exceptions import ValidationError


def validation_errors(validator, value, record=None, attribute="file"):
    """Errors raised by ``validator`` for ``value``, [] when valid."""
    try:
        validator.validate(record, attribute, value)
    except ValidationError as e:
        # every message must render with its params
        assert all(isinstance(m, str) for m in e.messages)
        return e.error_list
    return []


def codes(errors):
    return [e.code for e in errors]
