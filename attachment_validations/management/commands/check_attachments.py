# attachment_validations/management/commands/check_attachments.py
import logging

from django.apps import apps
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from attachment_validations.mixins import AttachmentValidationsMixin

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Run the attachment validators of a model against its stored records."

    def add_arguments(self, parser):
        parser.add_argument("model", help="app_label.ModelName")
        parser.add_argument(
            "--limit", type=int, help="Check at most this many records."
        )

    def handle(self, *args, **opts):
        try:
            model = apps.get_model(opts["model"])
        except (LookupError, ValueError):
            raise CommandError(f"Unknown model: {opts['model']}")
        if not issubclass(model, AttachmentValidationsMixin):
            raise CommandError(f"{model._meta.label} does not declare attachment validators.")

        qs = model._default_manager.order_by("pk")
        if opts.get("limit"):
            qs = qs[: max(1, opts["limit"])]

        checked = invalid = 0
        for record in qs.iterator():
            checked += 1
            try:
                record.validate_attachments()
            except ValidationError as e:
                invalid += 1
                for attribute, errors in e.error_dict.items():
                    codes = ", ".join(err.code for err in errors)
                    self.stdout.write(f"{model._meta.label} pk={record.pk} {attribute}: {codes}")
            except OSError:
                # file missing from storage
                invalid += 1
                logger.warning("Could not read attachments of %s pk=%s", model._meta.label, record.pk, exc_info=True)
                self.stderr.write(self.style.WARNING(f"{model._meta.label} pk={record.pk}: unreadable attachment"))

        style = self.style.SUCCESS if not invalid else self.style.ERROR
        self.stdout.write(style(f"Checked {checked} record(s), {invalid} invalid."))
