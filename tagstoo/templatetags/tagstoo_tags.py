"""
Page-aware template tags.

Usage in templates:
1. Load the tags: {% load tagstoo_tags %}

2. Put the current page in the context as ``page`` (or set
   TAGSTOO_PAGE_CONTEXT_NAME), or pass ``page=`` to a tag

3. Use the tags:
    <body class="{% path %}">
    <title>{% seo_title %}</title>
    {% box color="blue" heading="News" %}...{% endbox %}
"""

import logging

from django import template
from django.utils.safestring import mark_safe

from tagstoo import boxes, paths, titles
from tagstoo.conf import get_setting
from tagstoo.pages import get_current_page, page_attr, page_url, root_slug_is_slash

register = template.Library()

logger = logging.getLogger(__name__)


@register.simple_tag(takes_context=True)
def path(context, at=None, page=None):
    """
    Exploded url slugs of the current page, separated by whitespace.

    A root page with a slug of "/" explodes to an imaginary "home" slug. Given
    the tree Home (/) > Services (services) > Web Design (web-design), on the
    Web Design page:

      {% path %}           -> home services web-design
      {% path at=1 %}      -> home   (at=0 also grabs the root)
      {% path at=2 %}      -> services
      {% path at=-1 %}     -> web-design
      {% path at=4 %}      -> (empty)

    ``at`` naming a missing context variable resolves to "", which selects
    the root like ``at=""`` does; it does not fall back to the full path.
    """
    page = get_current_page(context, page)
    if page is None:
        return ""
    return paths.resolve(
        page_url(page),
        root_slug_is_slash(page),
        at,
        home=get_setting("TAGSTOO_HOME_SEGMENT"),
    )


@register.simple_tag(takes_context=True)
def seo_title(context, page=None):
    """
    The page's "keywords" field unless it is blank, else the page title:

      <title>{% seo_title %}</title>
    """
    return titles.seo_title(get_current_page(context, page), context)


class BoxNode(template.Node):
    def __init__(self, nodelist, attrs):
        self.nodelist = nodelist
        self.attrs = attrs

    def render(self, context):
        content = self.nodelist.render(context)

        attrs = {
            key: self._resolve_variable(value, context)
            for key, value in self.attrs.items()
        }
        options, passthrough = boxes.split_attrs(attrs)

        page_title = None
        if boxes.is_true(options.get("use_title_as_heading")):
            page_title = page_attr(get_current_page(context), "title")

        html = boxes.render_box(
            content,
            color=options.get("color"),
            css_class=options.get("class"),
            heading=options.get("heading"),
            use_title_as_heading=options.get("use_title_as_heading"),
            page_title=page_title,
            attrs=passthrough,
        )
        return mark_safe(html)

    def _resolve_variable(self, value, context):
        """Resolve template variables or return the literal value"""
        if hasattr(value, "resolve"):
            resolved = value.resolve(context, ignore_failures=True)
            if resolved is None:
                logger.debug("Unresolvable box argument '%s'", value.token)
                return context.template.engine.string_if_invalid
            return resolved
        return value


@register.tag("box")
def do_box(parser, token):
    """
    Usage:
    {% box color="blue" class="wide" heading="News" id="news" %}
        Box content with {{ variable }}
    {% endbox %}

    ``use_title_as_heading="true"`` uses the page title when no heading is
    given. Any other argument becomes an attribute of the wrapper div.

    Argument values are inserted as-is, without escaping; pass untrusted
    variables through ``|escape`` (or ``|force_escape``) first.
    """
    bits = token.split_contents()
    tag_name = bits[0]

    attrs = {}
    for bit in bits[1:]:
        if "=" not in bit:
            raise template.TemplateSyntaxError(
                f"'{tag_name}' arguments must be name=value pairs, got '{bit}'"
            )
        key, value = bit.split("=", 1)

        # Handle quoted strings
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            attrs[key] = value[1:-1]
        else:
            # Handle unquoted template variables
            try:
                attrs[key] = parser.compile_filter(value)
            except template.TemplateSyntaxError:
                # If it fails to parse as a filter, treat as literal string
                attrs[key] = value

    nodelist = parser.parse(("endbox",))
    parser.delete_first_token()

    return BoxNode(nodelist, attrs)
