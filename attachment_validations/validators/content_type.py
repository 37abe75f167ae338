# attachment_validations/validators/content_type.py
import mimetypes
import re
from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.deconstruct import deconstructible

from ..metadata import metadata_for
from ..options import Option, as_list
from ..utils.files import declared_content_type
from .base import BaseAttachmentValidator

# types python-magic reports when it cannot tell more
GENERIC_TYPES = ("application/octet-stream", "text/plain")

ALIASES = {
    "image/jpg": "image/jpeg",
    "image/pjpeg": "image/jpeg",
    "image/x-png": "image/png",
    "application/x-pdf": "application/pdf",
}


def normalize_content_type(value: str) -> Optional[str]:
    """Known MIME type for a MIME string or a bare extension ("png"), else None."""
    value = value.strip().lower()
    if "/" in value:
        value = ALIASES.get(value, value)
        return value if mimetypes.guess_extension(value) else None
    guessed, _ = mimetypes.guess_type(f"file.{value.lstrip('.')}")
    return guessed


def human_content_type(content_type) -> str:
    if isinstance(content_type, re.Pattern):
        return content_type.pattern
    extension = mimetypes.guess_extension(content_type or "")
    return extension[1:].upper() if extension else (content_type or "")


@deconstructible
class ContentTypeValidator(BaseAttachmentValidator):
    """
    Allowed content types, given as MIME types ("image/png"), extensions
    ("png"), compiled regexes, a list of those, or a callable returning them.
    The type is sniffed from the file content. When the sniff is only generic
    (plain text, octet-stream) the declared or filename-guessed type is used.
    With ``spoofing_protection`` a client-declared type that disagrees with
    the content is rejected too.
    """

    def __init__(self, content_type, *, spoofing_protection=False, **kwargs):
        self.content_type = content_type
        self.spoofing_protection = spoofing_protection
        super().__init__(**kwargs)
        self.option = Option.parse(content_type)

    def check_validity(self):
        if callable(self.content_type):
            return
        allowed_types = as_list(self.content_type)
        if not allowed_types:
            raise ImproperlyConfigured("content_type must not be empty")
        for allowed in allowed_types:
            if isinstance(allowed, re.Pattern):
                continue
            if not isinstance(allowed, str) or normalize_content_type(allowed) is None:
                raise ImproperlyConfigured(
                    f"{allowed!r} is not a valid content type, register it with mimetypes.add_type()"
                )

    def authorized_types(self, record) -> list:
        resolved = []
        for allowed in as_list(self.option.resolve(record)):
            if isinstance(allowed, re.Pattern):
                resolved.append(allowed)
            else:
                resolved.append(normalize_content_type(allowed) or allowed)
        return resolved

    @staticmethod
    def is_authorized(content_type, authorized) -> bool:
        for allowed in authorized:
            if isinstance(allowed, re.Pattern):
                if allowed.match(content_type):
                    return True
            elif allowed == content_type:
                return True
        return False

    def validate_file(self, record, django_file, errors):
        declared = declared_content_type(django_file)
        detected = metadata_for(django_file).get("content_type", "")
        if detected in GENERIC_TYPES and declared:
            # plain text or unknown bytes: trust the declared or guessed type
            content_type = declared
        else:
            content_type = detected or declared
        content_type = ALIASES.get(content_type, content_type)
        authorized = self.authorized_types(record)

        if not self.is_authorized(content_type, authorized):
            self.add_error(
                errors, "content_type_invalid", django_file,
                content_type=content_type,
                human_content_type=human_content_type(content_type),
                authorized_human_content_types=", ".join(human_content_type(a) for a in authorized),
                count=len(authorized),
            )
            return

        if self.spoofing_protection and self.is_spoofed(declared, detected):
            self.add_error(
                errors, "content_type_spoofed", django_file,
                content_type=declared,
                human_content_type=human_content_type(declared),
                detected_content_type=detected,
                detected_human_content_type=human_content_type(detected),
            )

    @staticmethod
    def is_spoofed(declared: str, detected: str) -> bool:
        if not declared or not detected or detected in GENERIC_TYPES:
            return False
        if declared == "application/octet-stream":
            return False
        return ALIASES.get(declared, declared) != ALIASES.get(detected, detected)
