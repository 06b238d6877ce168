"""
Services for editing admission requirement lists
"""
import logging

from django.db import transaction
from django.utils.translation import gettext_lazy as _

from apps.corecode.utils import clean_lines

from .models import AdmissionRequirement

logger = logging.getLogger(__name__)


class RequirementError(Exception):
    """Requirement list could not be changed"""
    pass


class RequirementService:
    """Line-level edits to an AdmissionRequirement"""

    @classmethod
    def update_requirements(cls, requirement_id, title, requirements):
        """Replace title and lines; blank lines are dropped"""
        with transaction.atomic():
            try:
                requirement = AdmissionRequirement.objects.select_for_update().get(pk=requirement_id)
            except AdmissionRequirement.DoesNotExist:
                raise RequirementError(_("Requirement not found"))

            requirement.title = title.strip()
            requirement.requirements = clean_lines(requirements)
            requirement.save(update_fields=["title", "requirements"])

        logger.info("Updated requirements %s (%s lines)", requirement.pk, len(requirement.requirements))
        return requirement

    @classmethod
    def remove_requirement_line(cls, requirement_id, index):
        """
        Drop one line from a requirement list.

        Returns the removed line; raises RequirementError when the record or
        the line does not exist.
        """
        with transaction.atomic():
            try:
                requirement = AdmissionRequirement.objects.select_for_update().get(pk=requirement_id)
            except AdmissionRequirement.DoesNotExist:
                raise RequirementError(_("Requirement not found"))

            lines = list(requirement.requirements)
            if index < 0 or index >= len(lines):
                raise RequirementError(_("Requirement line not found"))

            removed = lines.pop(index)
            requirement.requirements = lines
            requirement.save(update_fields=["requirements"])

        logger.info("Removed line %s from requirements %s", index, requirement.pk)
        return removed
