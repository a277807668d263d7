"""
HTML for the ``{% box %}`` block tag.

A box is a wrapper div with optional heading around pre-rendered content::

    <div class="box bluebox">
      <h3 class="heading">Heading</h3>      (or <div class="top"></div>)
      <div class="content clearfix">...</div>
    </div>

Values are concatenated as given; escaping is left to the template engine.
"""

from .conf import get_setting

RECOGNIZED_ATTRS = ("color", "class", "heading", "use_title_as_heading")


def is_true(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() == "true"


def split_attrs(attrs):
    """
    Separate recognized box options from passthrough HTML attributes.

    Returns a ``(recognized, passthrough)`` pair of new dicts; ``attrs`` is
    left untouched.
    """
    attrs = attrs or {}
    recognized = {key: attrs[key] for key in RECOGNIZED_ATTRS if key in attrs}
    passthrough = {key: value for key, value in attrs.items() if key not in RECOGNIZED_ATTRS}
    return recognized, passthrough


def html_attrs(mapping) -> str:
    """Serialize a mapping as `` name="value"`` pairs in insertion order."""
    return "".join(f' {name}="{value}"' for name, value in (mapping or {}).items())


def box_classes(color=None, css_class=None) -> list[str]:
    classes = [get_setting("TAGSTOO_BOX_CLASS")]
    if color:
        classes.append(f"{color}box")
    if css_class:
        classes.extend(str(css_class).split())
    return classes


def resolve_heading(heading=None, use_title_as_heading=None, page_title=None):
    if heading is not None and str(heading).strip():
        return heading
    if is_true(use_title_as_heading) and page_title:
        return page_title
    return None


def render_box(
    content,
    color=None,
    css_class=None,
    heading=None,
    use_title_as_heading=None,
    page_title=None,
    attrs=None,
) -> str:
    classes = " ".join(box_classes(color, css_class))
    heading = resolve_heading(heading, use_title_as_heading, page_title)
    if heading:
        top = f'<h3 class="heading">{heading}</h3>'
    else:
        top = '<div class="top"></div>'

    return (
        f'<div class="{classes}"{html_attrs(attrs)}>'
        f"{top}"
        f'<div class="content clearfix">{content}</div>'
        f"</div>"
    )
