"""
Duck-typed access to the host project's pages.

tagstoo ships no page model. Any object with some of ``url``, ``title``,
``keywords``, ``slug`` and ``parent`` works; missing attributes read as
blank values.
"""

import logging

from .conf import get_setting

logger = logging.getLogger(__name__)


def get_current_page(context, page=None):
    """Return the explicit page if given, else the page in the template context."""
    if page is not None and page != "":
        return page
    name = get_setting("TAGSTOO_PAGE_CONTEXT_NAME")
    current = context.get(name) if context is not None else None
    if current is None:
        logger.debug("No '%s' in template context", name)
    return current


def page_attr(page, name, default=""):
    if page is None:
        return default
    value = getattr(page, name, None)
    if callable(value):
        value = value()
    return default if value is None else value


def page_url(page) -> str:
    """Return the page URL from ``url``, ``get_url()`` or ``get_absolute_url()``."""
    for name in ("url", "get_url", "get_absolute_url"):
        value = page_attr(page, name, None)
        if value is not None:
            return str(value)
    return ""


def find_root(page):
    """Walk ``parent`` links up to the top of the page tree."""
    if page is None:
        return None
    seen = {id(page)}
    node = page
    while True:
        parent = getattr(node, "parent", None)
        if parent is None or id(parent) in seen:
            return node
        seen.add(id(parent))
        node = parent


def root_slug_is_slash(page) -> bool:
    root = find_root(page)
    return page_attr(root, "slug") == get_setting("TAGSTOO_ROOT_SLUG")
