# attachment_validations/metadata.py
"""
Width / height / content type of attached files.

Analysis happens at most once per file object: the result is memoized on the
file, and for files already saved to a storage it is also kept in the Django
cache (see ``tasks.analyze_stored_file`` which fills it in the background).
Videos are probed with ffprobe; when it is missing or fails the file simply
has no dimensions. An empty dict means the file could not be analyzed.
"""
import logging

from django.core.cache import caches

from .conf import get_setting
from .utils.files import detect_mime, filename_of, is_pdf
from .utils.images import image_dimensions
from .utils.pdf import pdf_dimensions
from .utils.video import video_dimensions

logger = logging.getLogger(__name__)

METADATA_ATTR = "_attachment_metadata"
CACHE_PREFIX = "attachment_validations:metadata:"


def cache_key(name: str) -> str:
    return f"{CACHE_PREFIX}{name}"


def get_cache():
    return caches[get_setting("CACHE_ALIAS")]


def is_stored(django_file) -> bool:
    """Saved FieldFile, as opposed to a fresh upload."""
    return bool(
        getattr(django_file, "storage", None)
        and getattr(django_file, "_committed", False)
        and django_file.name
    )


def _dimensions(django_file, content_type: str):
    if content_type == "application/pdf" or (not content_type and is_pdf(django_file)):
        return pdf_dimensions(django_file)
    if content_type.startswith("image/") or not content_type:
        return image_dimensions(django_file)
    if content_type.startswith("video/"):
        return video_dimensions(django_file)
    return None


def analyze(django_file) -> dict:
    content_type = detect_mime(django_file)
    metadata = {"content_type": content_type} if content_type else {}
    try:
        dimensions = _dimensions(django_file, content_type)
    except Exception:
        logger.debug("Could not read dimensions of %s", filename_of(django_file), exc_info=True)
        dimensions = None
    if dimensions and all(d > 0 for d in dimensions):
        metadata["width"], metadata["height"] = dimensions
    return metadata


def store_metadata(name: str, metadata: dict):
    get_cache().set(cache_key(name), metadata, get_setting("METADATA_CACHE_TIMEOUT"))


def metadata_for(django_file) -> dict:
    memo = getattr(django_file, METADATA_ATTR, None)
    if memo is not None and memo[0] == django_file.name:
        return memo[1]

    stored = is_stored(django_file)
    metadata = get_cache().get(cache_key(django_file.name)) if stored else None
    if metadata is not None:
        logger.debug("Metadata cache hit for %s", django_file.name)
    else:
        metadata = analyze(django_file)
        if stored:
            store_metadata(django_file.name, metadata)

    setattr(django_file, METADATA_ATTR, (django_file.name, metadata))
    return metadata


def has_dimensions(metadata: dict) -> bool:
    return bool(metadata.get("width")) and bool(metadata.get("height"))
