# attachment_validations/utils/files.py
import logging
import mimetypes
import os
from contextlib import contextmanager

import magic
from django.core.files.base import File

from ..conf import get_setting

logger = logging.getLogger(__name__)


@contextmanager
def rewound(django_file):
    """Yield the file positioned at its start, restoring the position afterwards."""
    opened_here = False
    if getattr(django_file, "closed", False):
        django_file.open("rb")
        opened_here = True
    position = django_file.tell() if not opened_here else 0
    django_file.seek(0)
    try:
        yield django_file
    finally:
        if opened_here:
            django_file.close()
        else:
            django_file.seek(position)


def read_head(django_file, size=None) -> bytes:
    size = size or get_setting("SNIFF_BYTES")
    with rewound(django_file) as f:
        return f.read(size) or b""


def read_all(django_file) -> bytes:
    with rewound(django_file) as f:
        return f.read() or b""


def detect_mime(django_file) -> str:
    head = read_head(django_file)
    try:
        return magic.from_buffer(head, mime=True) or ""
    except Exception:
        logger.debug("MIME detection failed for %s", filename_of(django_file), exc_info=True)
        return ""


def is_pdf(django_file) -> bool:
    if detect_mime(django_file) == "application/pdf":
        return True
    # PDF signature
    return read_head(django_file, 5) == b"%PDF-"


def filename_of(django_file) -> str:
    return os.path.basename(getattr(django_file, "name", "") or "")


def declared_content_type(django_file) -> str:
    """Type announced by the client, else guessed from the file name."""
    declared = getattr(django_file, "content_type", None)
    if declared:
        return declared.split(";")[0].strip().lower()
    guessed, _ = mimetypes.guess_type(filename_of(django_file))
    return guessed or ""


def is_attached(value) -> bool:
    if value is None:
        return False
    if isinstance(value, File):
        return bool(value.name)
    return bool(value)


def attachables(value) -> list:
    """Normalize a single file, an empty FieldFile or a list of files to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [item for item in value if is_attached(item)]
    return [value] if is_attached(value) else []
