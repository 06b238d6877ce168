"""
Helpers shared by the content apps: slugs, rich-text cleaning and list filters
"""
import nh3
from django.utils.text import slugify

RICH_TEXT_TAGS = {"p", "strong", "em", "u", "h1", "h2", "h3", "ul", "ol", "li", "a"}
RICH_TEXT_ATTRIBUTES = {"a": {"href", "target", "rel"}}

NO_DATE_YET = "No-DATE-YET"

# Fixed path segments that sit beside the <slug> detail routes
RESERVED_SLUGS = frozenset({"api", "courses", "create"})


def generate_slug(value, max_length=None):
    """Lowercase, hyphen-separated slug; optionally truncated"""
    slug = slugify(value or "")
    if max_length:
        slug = slug[:max_length].strip("-")
    return slug


def sanitize_html(html):
    """Keep the editor's formatting tags and drop everything else"""
    if not html:
        return ""
    return nh3.clean(
        html,
        tags=RICH_TEXT_TAGS,
        attributes=RICH_TEXT_ATTRIBUTES,
        link_rel=None,
    )


def clean_lines(values):
    """Strip entries and drop the blank ones"""
    return [value.strip() for value in values if value and value.strip()]


def unique_values(values, reverse=False):
    """Distinct, non-empty values in sorted order"""
    return sorted({value for value in values if value}, reverse=reverse)


def apply_choice_filter(queryset, field, value):
    """Filter on an exact value unless the selection is empty or 'all'"""
    if not value or value == "all":
        return queryset
    return queryset.filter(**{field: value})
