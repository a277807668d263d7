"""
Settings for the tagstoo app.

Values are read from ``django.conf.settings`` on every access so that
``override_settings`` in tests takes effect immediately.
"""

from django.conf import settings

DEFAULTS = {
    # Context variable holding the current page
    "TAGSTOO_PAGE_CONTEXT_NAME": "page",
    # Implicit first segment when the root page's slug is TAGSTOO_ROOT_SLUG
    "TAGSTOO_HOME_SEGMENT": "home",
    "TAGSTOO_ROOT_SLUG": "/",
    "TAGSTOO_BOX_CLASS": "box",
    # Template rendered for {% seo_title %} when keywords are blank
    "TAGSTOO_TITLE_TEMPLATE": None,
}


def get_setting(name):
    return getattr(settings, name, DEFAULTS[name])
