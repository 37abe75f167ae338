# attachment_validations/conf.py
from django.conf import settings

DEFAULTS = {
    "SNIFF_BYTES": 4096,
    "CACHE_ALIAS": "default",
    "METADATA_CACHE_TIMEOUT": 60 * 60 * 24,
    "ANALYZE_ON_SAVE": False,
}


def get_setting(name: str):
    """Read one key of ``settings.ATTACHMENT_VALIDATIONS``, falling back to DEFAULTS."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown attachment validations setting: {name}")
    user_settings = getattr(settings, "ATTACHMENT_VALIDATIONS", None) or {}
    return user_settings.get(name, DEFAULTS[name])
