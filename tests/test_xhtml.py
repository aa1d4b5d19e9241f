from unittest import TestCase

import pytest

import tagsmith
from tagsmith import EscapeMode, Profile


class TestXhtml11(TestCase):
    def setUp(self):
        tagsmith.set_profile(Profile.XHTML11)

    def test_profile(self):
        assert tagsmith.get_profile() == "xhtml11"

    def test_doctype(self):
        assert tagsmith.doctype() == (
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">'
        )

    def test_families(self):
        assert not tagsmith.is_html5()
        assert not tagsmith.is_html4()
        assert tagsmith.is_xml()

    def test_escape_mode(self):
        assert tagsmith.get_escape_mode() is EscapeMode.XHTML

    def test_open_tag(self):
        assert tagsmith.open_tag("p") == "<p>"
        assert tagsmith.open_tag("img") == "<img />"
        assert tagsmith.open_tag("IMG", {"SRC": "a.png"}) == '<img src="a.png" />'

    def test_close_tag(self):
        assert tagsmith.close_tag("p") == "</p>"
        assert tagsmith.close_tag("img") == ""
        assert tagsmith.close_tag("DIV") == "</div>"

    def test_attributes(self):
        rsp = tagsmith.attrs(
            {
                "id": "foo",
                "title": "Hello World",
                "autofocus": True,
                "novalidate": "novalidate",
            }
        )
        assert rsp == ' id="foo" title="Hello World" autofocus="autofocus" novalidate="novalidate"', rsp

    def test_short_attributes(self):
        assert tagsmith.attrs({"id": "foo", "autofocus": True}) == ' id="foo" autofocus="autofocus"'

    def test_simple_tags(self):
        assert tagsmith.tag("div") == "<div></div>"
        assert tagsmith.tag("br") == "<br />"
        assert tagsmith.tag("span") == "<span></span>"

    def test_simple_tags_with_attributes(self):
        rsp = tagsmith.tag("div", "", {"class": "foo", "title": "bar", "baz": True})
        assert rsp == '<div class="foo" title="bar" baz="baz"></div>', rsp

    def test_boolean_attributes(self):
        assert tagsmith.tag("input", "", {"autofocus": True}) == '<input autofocus="autofocus" />'
        assert tagsmith.tag("input", "", {"autofocus": "autofocus"}) == '<input autofocus="autofocus" />'

    def test_mixed_attributes(self):
        rsp = tagsmith.tag(
            "input",
            "",
            {"type": "text", "class": "foo bar", "autofocus": True, "required": "required"},
        )
        assert rsp == '<input type="text" class="foo bar" autofocus="autofocus" required="required" />', rsp

    def test_data_attributes(self):
        rsp = tagsmith.tag("div", "", {"data-foo-bar": "something else"})
        assert rsp == '<div data-foo-bar="something else"></div>', rsp

    def test_empty_tag_has_no_content(self):
        assert tagsmith.tag("img", "Lorem ipsum", {}) == "<img />"

    def test_tag_with_the_works(self):
        rsp = tagsmith.tag(
            "div",
            "Lorem ipsum",
            {
                "class": ["hello-world", "hi"],
                "data-something": "bar",
                "data-another": True,
                "data-blarg": "bar sneh",
            },
        )
        assert rsp == (
            '<div class="hello-world hi" data-something="bar" data-another="data-another" '
            'data-blarg="bar sneh">Lorem ipsum</div>'
        ), rsp

    def test_downgrade_html5_tag(self):
        assert tagsmith.tag("article") == '<div class="article"></div>'
        assert tagsmith.tag("time") == '<span class="time"></span>'

    def test_tag_casing(self):
        rsp = tagsmith.tag("P", "Lorem ipsum", {"CLASS": "foo"})
        assert rsp == '<p class="foo">Lorem ipsum</p>', rsp

    def test_single_quote_entity(self):
        assert tagsmith.escape("it's") == "it&#039;s"
        assert tagsmith.unescape("it&apos;s") == "it's"


@pytest.mark.parametrize(
    ("profile", "doctype"),
    [
        (
            "xhtml1-strict",
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
            '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
        ),
        (
            "xhtml1-trans",
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
            '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">',
        ),
    ],
)
def test_xhtml1(profile, doctype):
    tagsmith.set_profile(profile)
    assert tagsmith.doctype() == doctype
    assert tagsmith.is_xml()
    assert not tagsmith.is_html5()
    assert not tagsmith.is_html4()
    assert tagsmith.get_escape_mode() is EscapeMode.XHTML
    assert tagsmith.tag("HR", "ignored") == "<hr />"
    assert tagsmith.tag("summary", "More") == '<div class="summary">More</div>'
