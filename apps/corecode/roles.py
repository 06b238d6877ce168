from django.conf import settings

from .models import UserMetadata


def get_user_role(user):
    """Role claim for a user, or None"""
    if user is None or not user.is_authenticated:
        return None
    try:
        return user.metadata.role
    except UserMetadata.DoesNotExist:
        return None


def is_dashboard_admin(user):
    return get_user_role(user) == settings.DASHBOARD_ADMIN_ROLE


def grant_role(user, role=None):
    """Write the role claim into the user's public metadata"""
    metadata, _ = UserMetadata.objects.get_or_create(user=user)
    metadata.public_metadata = {
        **metadata.public_metadata,
        "role": role or settings.DASHBOARD_ADMIN_ROLE,
    }
    metadata.save(update_fields=["public_metadata", "updated_at"])
    return metadata
