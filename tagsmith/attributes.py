"""Rendering of HTML attribute lists.

An attribute value is one of:

* a ``bool``, ``True`` for a boolean attribute such as ``autofocus``;
* a ``str``;
* a ``list`` or ``tuple`` of strings, joined with single spaces
  (handy for ``class``).

``None`` and ``False`` drop the attribute. A string equal to the
attribute name (``novalidate="novalidate"``) is a boolean attribute too.
"""

import re
from collections.abc import Mapping

from tagsmith.errors import InvalidArgument, check_type
from tagsmith.escaping import escape

_re_needs_quotes = re.compile(r"[\s=`]")

VALUE_KINDS = "boolean, string or list of strings"


def render_name(name, profile):
    return name.lower() if profile.is_xml else name


def resolve_value(name, value, profile):
    """Return the text to render after ``name=``, or None for a bare attribute."""
    if value is True or (isinstance(value, str) and value == name):
        return name if profile.is_xml else None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def render_value(value, profile):
    escaped = escape(value, profile.escape_mode)
    if profile.is_xml or not value or _re_needs_quotes.search(value):
        return '"' + escaped + '"'
    return escaped


def render_attr(name, value, profile):
    """Render a single ``name=value`` pair with its leading space."""
    if value is None or value is False:
        return ""
    actual = resolve_value(name, value, profile)
    if actual is None:
        return " " + render_name(name, profile)
    return " " + render_name(name, profile) + "=" + render_value(actual, profile)


def check_attrs(attrs, function_name="attrs", position=1):
    """Validate an attribute mapping passed as argument *position* of *function_name*.

    Errors name the offending attribute so the call site can be fixed.
    """
    if attrs is None:
        return
    check_type(function_name, position, attrs, Mapping, "mapping")
    for name, value in attrs.items():
        if not isinstance(name, str):
            raise InvalidArgument(function_name, position, "string attribute names", name, f"attribute {name!r}")
        if not is_valid_value(value):
            raise InvalidArgument(function_name, position, VALUE_KINDS, value, f"attribute {name!r}")


def is_valid_value(value):
    if value is None or isinstance(value, (bool, str)):
        return True
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def render_attrs(attrs, profile, function_name="attrs", position=1):
    """Render a mapping of attributes, keeping its iteration order."""
    check_attrs(attrs, function_name, position)
    if not attrs:
        return ""
    return "".join(render_attr(name, value, profile) for name, value in attrs.items())
