import re

from django.test import override_settings

from tagstoo.boxes import (
    box_classes,
    html_attrs,
    is_true,
    render_box,
    resolve_heading,
    split_attrs,
)


def classes_of(html):
    return re.match(r'<div class="([^"]*)"', html).group(1).split()


def test_color_adds_color_class():
    html = render_box("x", color="blue")
    assert classes_of(html) == ["box", "bluebox"]


def test_extra_classes_follow_color():
    assert box_classes("red", "wide  padded") == ["box", "redbox", "wide", "padded"]


@override_settings(TAGSTOO_BOX_CLASS="panel")
def test_base_class_is_configurable():
    assert box_classes() == ["panel"]


def test_no_heading_renders_top_placeholder():
    html = render_box("<p>Hi</p>")
    assert html == (
        '<div class="box"><div class="top"></div>'
        '<div class="content clearfix"><p>Hi</p></div></div>'
    )


def test_heading_renders_h3():
    html = render_box("x", heading="News")
    assert '<h3 class="heading">News</h3>' in html
    assert 'class="top"' not in html


def test_page_title_as_heading():
    html = render_box("x", use_title_as_heading="true", page_title="About")
    assert '<h3 class="heading">About</h3>' in html


def test_explicit_heading_wins_over_page_title():
    assert resolve_heading("News", "true", "About") == "News"


def test_page_title_needs_flag():
    assert resolve_heading(None, "false", "About") is None
    assert resolve_heading(None, None, "About") is None


def test_is_true():
    assert is_true("true")
    assert is_true("TRUE")
    assert is_true(True)
    assert not is_true("yes")
    assert not is_true(None)


def test_split_attrs_leaves_input_alone():
    attrs = {"color": "blue", "id": "news", "class": "wide", "data-x": "1"}
    recognized, passthrough = split_attrs(attrs)
    assert recognized == {"color": "blue", "class": "wide"}
    assert passthrough == {"id": "news", "data-x": "1"}
    assert len(attrs) == 4


def test_passthrough_attrs_in_order():
    assert html_attrs({"id": "news", "style": "width: 50%"}) == ' id="news" style="width: 50%"'
    assert html_attrs(None) == ""


def test_render_box_serializes_passthrough_attrs():
    html = render_box("x", color="blue", attrs={"id": "news"})
    assert html.startswith('<div class="box bluebox" id="news">')


def test_blank_heading_falls_back_to_page_title():
    assert resolve_heading(" ", "true", "About") == "About"
    assert resolve_heading("", None, "About") is None


def test_blank_heading_renders_top_placeholder():
    html = render_box("x", heading="  ")
    assert '<div class="top"></div>' in html
    assert "<h3" not in html
