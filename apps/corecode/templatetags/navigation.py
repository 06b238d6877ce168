from django import template
from django.urls import NoReverseMatch, reverse

from apps.corecode import roles

register = template.Library()

DASHBOARD_NAV = [
    {"title": "Dashboard", "url": "corecode:home", "icon": "fas fa-tachometer-alt"},
    {"title": "About Us", "url": "corecode:about", "icon": "fas fa-info-circle"},
    {
        "title": "Programs",
        "url": "#",
        "icon": "fas fa-graduation-cap",
        "children": [
            {"title": "Programs", "url": "programs:program_list"},
            {"title": "Courses", "url": "programs:course_list"},
        ],
    },
    {"title": "Staff", "url": "staffs:staff_list", "icon": "fas fa-chalkboard-teacher"},
    {"title": "Alumni", "url": "alumni:alumni_list", "icon": "fas fa-user-graduate"},
    {"title": "News", "url": "news:news_list", "icon": "fas fa-newspaper"},
    {
        "title": "Fees",
        "url": "#",
        "icon": "fas fa-money-bill-wave",
        "children": [
            {"title": "Program Fees", "url": "finance:fee_list"},
            {"title": "Additional Fees", "url": "finance:additional_fee_list"},
            {"title": "Extra Fees", "url": "finance:extra_fees"},
        ],
    },
    {
        "title": "Materials",
        "url": "#",
        "icon": "fas fa-file-pdf",
        "children": [
            {"title": "Course Materials", "url": "materials:material_list"},
            {"title": "GPC Materials", "url": "materials:gpc_list"},
        ],
    },
    {
        "title": "Admissions",
        "url": "#",
        "icon": "fas fa-file-alt",
        "children": [
            {"title": "Requirements", "url": "admissions:requirement_list"},
            {"title": "Alternative Routes", "url": "admissions:route_list"},
            {"title": "How to Apply", "url": "admissions:how_to_apply_list"},
        ],
    },
    {"title": "Contact Us", "url": "contact:contact_info", "icon": "fas fa-address-book"},
    {"title": "PG Students", "url": "students:student_list", "icon": "fas fa-users"},
]


@register.inclusion_tag("corecode/navigation/admin_nav.html", takes_context=True)
def admin_navigation(context):
    """Sidebar menu - only includes URLs that resolve"""
    request = context.get("request")

    nav_items = []
    for item in DASHBOARD_NAV:
        if item.get("children"):
            children = [child for child in item["children"] if _check_url_exists(child["url"])]
            # Only include a group if it has valid children
            if children:
                nav_items.append({**item, "children": children})
        elif _check_url_exists(item["url"]):
            nav_items.append(item)

    return {"nav_items": nav_items, "request": request}


@register.simple_tag(takes_context=True)
def get_user_role(context):
    """Role claim of the signed-in user, for display"""
    request = context.get("request")
    if not request:
        return None
    return roles.get_user_role(request.user)


def _check_url_exists(url_name):
    """Check if a URL name exists in URL patterns"""
    if url_name == "#":
        return True
    try:
        reverse(url_name)
        return True
    except NoReverseMatch:
        return False
