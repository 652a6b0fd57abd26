import re

from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

__all__ = [
    'DjangoRenderContext',
    'RenderContext',
]

tag_name_re = re.compile(r'[a-zA-Z][a-zA-Z0-9-]*')


class RenderContext:
    """
    The markup capability a presenter needs from the view layer.

    Implementations produce a single element from a tag name, its text
    content and a mapping of attributes, and are responsible for escaping
    both the content and the attribute values.
    """
    def content_tag(self, tag_name, content, attrs=None):
        raise NotImplementedError


class DjangoRenderContext(RenderContext):
    """
    Render markup using Django's HTML utilities.

    Returned fragments are SafeStrings, so they can be dropped straight into
    a template without being escaped a second time. Attributes are written
    in the order they appear in the mapping.
    """
    def content_tag(self, tag_name, content, attrs=None):
        if not tag_name_re.fullmatch(tag_name or ''):
            raise ValueError('Invalid tag name: %r' % tag_name)
        return format_html(
            '<{0}{1}>{2}</{0}>',
            mark_safe(tag_name),
            format_html_join('', ' {}="{}"', (attrs or {}).items()),
            content,
        )

    def join(self, fragments):
        """
        Join the non-empty fragments with a space. Fragments that are not
        already safe are escaped.
        """
        return format_html_join(
            ' ', '{}', ((fragment,) for fragment in fragments if fragment)
        )
