"""
Read side of the site content shown on the public pages
"""
from apps.alumni.models import Alumnus
from apps.programs.models import Program
from apps.staffs.models import Staff

from .models import Hero, Mission, Vision


def get_hero():
    return [hero.as_dict() for hero in Hero.objects.order_by("pk")]


def get_vision():
    return [vision.as_dict() for vision in Vision.objects.order_by("pk")]


def get_mission():
    return [mission.as_dict() for mission in Mission.objects.order_by("pk")]


def get_all_content():
    """Everything the landing page needs in one payload"""
    return {
        "hero": get_hero(),
        "vision": get_vision(),
        "mission": get_mission(),
        "programs": [program.as_dict() for program in Program.objects.order_by("pk")],
        "alumni": [alumnus.as_dict() for alumnus in Alumnus.objects.order_by("pk")],
        "staff": [staff.as_dict() for staff in Staff.objects.select_related("image").order_by("pk")],
    }
