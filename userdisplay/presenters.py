import logging

from .render import DjangoRenderContext
from .utils import PresenterError, get_badge

__all__ = [
    'USER_ATTRIBUTES',
    'UserDisplayPresenter',
]

USER_ATTRIBUTES = ('first_name', 'last_name', 'is_admin', 'is_moderator')

logger = logging.getLogger('userdisplay')


class UserDisplayPresenter:
    """
    Wraps a user for display, e.g. "Jane D." followed by role badges.

    The user may be any object exposing first_name, last_name, is_admin and
    is_moderator. The render context supplies content_tag(), and defaults to
    Django's HTML utilities.

    A presenter is meant to live for a single render pass. It reads the user
    each time a value is asked for and never modifies it.
    """
    def __init__(self, user, render_context=None):
        if user is None:
            raise PresenterError('Cannot present a missing user.')
        missing = [
            attr for attr in USER_ATTRIBUTES
            if not hasattr(user, attr)
        ]
        if missing:
            raise PresenterError(
                'User object is missing required attributes: %s.'
                % ', '.join(missing)
            )
        if render_context is None:
            render_context = DjangoRenderContext()
        elif not callable(getattr(render_context, 'content_tag', None)):
            raise PresenterError('Render context must provide content_tag().')

        self.user = user
        self.render_context = render_context

    def display_name(self):
        """
        Return the user's first name and last initial, e.g. "Jane D.".

        If the user has no last name, only the first name is returned.
        """
        first_name = (self.user.first_name or '').strip()
        last_name = (self.user.last_name or '').strip()
        if not last_name:
            logger.debug(
                'No last name for %(name)r, showing first name only.'
                % {'name': first_name}
            )
            return first_name
        return ' '.join(filter(None, [first_name, last_name[0] + '.']))

    def staff_badge(self):
        """
        Return a "Staff" badge if the user is an admin, otherwise None.
        """
        if self.user.is_admin:
            return self._badge('staff')
        return None

    def mod_badge(self):
        """
        Return a "Mod" badge if the user is a moderator, otherwise None.
        """
        if self.user.is_moderator:
            return self._badge('moderator')
        return None

    def badges(self):
        """
        Return all of the user's badges, separated by a space.
        """
        fragments = [self.staff_badge(), self.mod_badge()]
        join = getattr(self.render_context, 'join', None)
        if join:
            return join(fragments)
        return ' '.join(str(fragment) for fragment in fragments if fragment)

    def flair(self):
        """
        Return the user's roles as a space-separated string,
        e.g. "staff moderator".
        """
        flairs = []
        if self.user.is_admin:
            flairs.append('staff')
        if self.user.is_moderator:
            flairs.append('moderator')

        return ' '.join(flairs)

    def as_dict(self):
        """
        Return presented data as a dict for an API response.
        """
        return {
            'name': self.display_name(),
            'flair': self.flair(),
            'is_staff': bool(self.user.is_admin),
            'is_moderator': bool(self.user.is_moderator),
        }

    def _badge(self, role):
        badge = get_badge(role)
        return self.render_context.content_tag(
            badge['tag'],
            badge['label'],
            {'class': badge['class']},
        )

    def __str__(self):
        return self.display_name()
