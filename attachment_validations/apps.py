from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AttachmentValidationsConfig(AppConfig):
    name = "attachment_validations"
    verbose_name = _("Attachment validations")

    def ready(self):
        from . import signals  # noqa: F401
