# attachment_validations/tasks.py
import logging

from celery import shared_task
from django.apps import apps

from .metadata import analyze, store_metadata

logger = logging.getLogger(__name__)


@shared_task(bind=True, autoretry_for=(OSError,), retry_backoff=True, max_retries=3)
def analyze_stored_file(self, model_label: str, field_name: str, name: str):
    """Analyze a saved file and keep its metadata in the cache for later validations."""
    field = apps.get_model(model_label)._meta.get_field(field_name)
    with field.storage.open(name, "rb") as stored:
        metadata = analyze(stored)
    store_metadata(name, metadata)
    logger.info("Analyzed %s (%s.%s): %s", name, model_label, field_name, metadata)
    return metadata
