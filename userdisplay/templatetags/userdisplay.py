from django import template

from ..presenters import UserDisplayPresenter

register = template.Library()


@register.filter
def presenter(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user)


@register.simple_tag
def display_name(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user).display_name()


@register.simple_tag
def staff_badge(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user).staff_badge() or ''


@register.simple_tag
def mod_badge(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user).mod_badge() or ''


@register.simple_tag
def user_badges(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user).badges()


@register.simple_tag
def user_flair(user):
    if user is None:
        return ''
    return UserDisplayPresenter(user).flair()
