from django.conf import settings

__all__ = [
    'DEFAULT_BADGES',
    'PresenterError',
    'SafeException',
    'get_badge',
]

DEFAULT_BADGES = {
    'staff': {
        'label': 'Staff',
        'class': 'badge badge-success',
        'tag': 'span',
    },
    'moderator': {
        'label': 'Mod',
        'class': 'badge badge-primary',
        'tag': 'span',
    },
}


class SafeException(Exception):
    """
    Used to indicate an exception whose message is safe to display to end-users.
    """
    pass


class PresenterError(SafeException):
    """
    Used to indicate a presenter was given something it cannot present.
    """
    pass


def get_badge(role):
    """
    Return the badge definition for the given role, e.g. "staff".

    Values in settings.USERDISPLAY_BADGES take precedence over the defaults,
    key by key, so a site may change just the label or just the class.
    """
    badge = DEFAULT_BADGES[role].copy()
    overrides = getattr(settings, 'USERDISPLAY_BADGES', None) or {}
    badge.update(overrides.get(role) or {})
    return badge
