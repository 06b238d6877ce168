from django.core.management.base import BaseCommand
from django.db import transaction

from apps.admissions.models import AdmissionRequirement, HowToApply
from apps.contact.models import ContactInfo
from apps.corecode.models import Hero, Mission, Vision
from apps.finance.models import ExtraFee, ExtraFeesAccount, ExtraFeeType

REQUIREMENT_TITLES = [
    "Postgraduate Diploma (PGD)",
    "Masters Degree",
    "Doctor of Philosophy (PhD)",
]


class Command(BaseCommand):
    help = "Create the single-row site records and fee rows the dashboard edits in place"

    def handle(self, *args, **options):
        created = []

        with transaction.atomic():
            if not Hero.objects.exists():
                Hero.objects.create(
                    title="School of Postgraduate Studies",
                    desc=["Welcome to the School of Postgraduate Studies."],
                )
                created.append("hero")

            if not Vision.objects.exists():
                Vision.objects.create(title="Our Vision", desc="To be updated.")
                created.append("vision")

            if not Mission.objects.exists():
                Mission.objects.create(title="Our Mission", desc="To be updated.")
                created.append("mission")

            if not ExtraFeesAccount.objects.exists():
                ExtraFeesAccount.get_solo()
                created.append("extra fees account")

            for fee_type in ExtraFeeType.values:
                _fee, was_created = ExtraFee.objects.get_or_create(fee_type=fee_type)
                if was_created:
                    created.append(f"extra fee '{fee_type}'")

            if ContactInfo.current() is None:
                ContactInfo.objects.create(address="")
                created.append("contact information")

            if not HowToApply.objects.exists():
                HowToApply.objects.create(text="To be updated.", link="https://example.com/apply")
                created.append("how to apply")

            for title in REQUIREMENT_TITLES:
                _requirement, was_created = AdmissionRequirement.objects.get_or_create(title=title)
                if was_created:
                    created.append(f"requirements '{title}'")

        if not created:
            self.stdout.write("Site content already seeded")
            return

        for item in created:
            self.stdout.write(f"   Created {item}")
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(created)} records"))
