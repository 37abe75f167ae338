# attachment_validations/signals.py
from django.db import models, transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .conf import get_setting
from .metadata import cache_key, get_cache
from .mixins import AttachmentValidationsMixin
from .tasks import analyze_stored_file


def stored_files(instance):
    """(field name, stored name) of every non-empty file field."""
    for field in instance._meta.concrete_fields:
        if isinstance(field, models.FileField):
            f = getattr(instance, field.attname)
            if f and f.name:
                yield field.name, f.name


@receiver(post_save)
def analyze_attachments_on_save(sender, instance, **kwargs):
    if not get_setting("ANALYZE_ON_SAVE") or not isinstance(instance, AttachmentValidationsMixin):
        return
    cache = get_cache()
    for field_name, name in stored_files(instance):
        if cache.get(cache_key(name)) is not None:
            continue
        # run after commit so the worker finds the file and the row
        transaction.on_commit(
            lambda field_name=field_name, name=name: analyze_stored_file.delay(
                sender._meta.label, field_name, name
            )
        )
