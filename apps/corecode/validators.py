from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils.translation import gettext_lazy as _

email_pattern_validator = RegexValidator(
    regex=r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
    message=_("Invalid email address"),
)

international_phone_validator = RegexValidator(
    regex=r"^\+\d{10,15}$",
    message=_("Enter a valid phone number, e.g. +2348012345678."),
)

student_phone_validator = RegexValidator(
    regex=r"^(\+[0-9]{10,15}|0[0-9]{10})$",
    message=_("Enter a valid phone number (+2348012345678 or 08012345678)."),
)

https_url_validator = RegexValidator(
    regex=r"^https://.+",
    message=_("LinkedIn URL must start with 'https://'"),
)

linkedin_profile_validator = RegexValidator(
    regex=r"^https://(www\.)?linkedin\.com/in/[a-zA-Z0-9\-_.]+$",
    message=_("Provide a valid LinkedIn URL starting with https://linkedin.com/in/"),
)


def validate_image_size(upload):
    limit = settings.IMAGE_MAX_UPLOAD_SIZE
    if upload and upload.size > limit:
        raise ValidationError(
            _("File size must be less than %(max)sMB.") % {"max": limit // (1024 * 1024)}
        )


def validate_pdf(upload):
    if not upload:
        return
    content_type = getattr(upload, "content_type", "")
    if content_type != "application/pdf" and not upload.name.lower().endswith(".pdf"):
        raise ValidationError(_("Only PDF documents can be uploaded."))
    if upload.size > settings.STORAGE_MAX_UPLOAD_SIZE:
        raise ValidationError(_("Document is too large."))
