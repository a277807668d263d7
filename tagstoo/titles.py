"""
SEO-friendly page titles.

The page's "keywords" field doubles as a rich page title: meta keywords are
of questionable SEO value, page titles are not.
"""

import logging

from django.template import TemplateDoesNotExist
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from .conf import get_setting
from .pages import page_attr

logger = logging.getLogger(__name__)


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def select_title(keywords, title) -> str:
    """Return ``keywords`` unless blank, else ``title``."""
    if not is_blank(keywords):
        return str(keywords)
    return "" if title is None else str(title)


def render_title(page, context=None) -> str:
    """
    Render the fallback title.

    With ``TAGSTOO_TITLE_TEMPLATE`` set the title is rendered by that template
    (with the tag's context plus ``page``); otherwise the raw page title is used.
    """
    title = page_attr(page, "title")
    template_name = get_setting("TAGSTOO_TITLE_TEMPLATE")
    if not template_name:
        return str(title)

    template_context = context.flatten() if context is not None else {}
    template_context["page"] = page
    try:
        return mark_safe(render_to_string(template_name, template_context).strip())
    except TemplateDoesNotExist:
        logger.warning(
            "Title template '%s' not found, using page title", template_name, exc_info=True
        )
        return str(title)
    except Exception as e:
        logger.warning(
            f"Title template '{template_name}' failed to render: {e}", exc_info=True
        )
        return str(title)


def seo_title(page, context=None) -> str:
    if page is None:
        return ""
    keywords = page_attr(page, "keywords", None)
    if not is_blank(keywords):
        return select_title(keywords, None)
    return render_title(page, context)
