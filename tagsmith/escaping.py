"""HTML entity escaping for the three entity rule sets.

The rule sets only differ in how the single quote is written and in
which named entities are recognised, both when decoding and when
deciding whether an ampersand already starts an entity.
"""

import enum
import html.entities
import re

from tagsmith.errors import check_type


class EscapeMode(enum.Enum):
    HTML401 = "html401"
    XHTML = "xhtml"
    HTML5 = "html5"

    @property
    def apos(self):
        return "&apos;" if self is EscapeMode.HTML5 else "&#039;"

    def is_entity(self, name):
        """Tell whether ``&name;`` is a named entity under this mode."""
        if self is EscapeMode.HTML5:
            return name + ";" in html.entities.html5
        if self is EscapeMode.XHTML:
            return name in html.entities.name2codepoint or name == "apos"
        return name in html.entities.name2codepoint


_re_special = re.compile(r"[&<>\"']")
_re_entity_start = re.compile(r"&(?:([A-Za-z][A-Za-z0-9]*)|#[0-9]+|#[xX][0-9A-Fa-f]+);")
_re_encoded = re.compile(r"&(?:amp|lt|gt|quot|apos|#0*39|#[xX]0*27);")

_decoded = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&apos;": "'",
}


def escape(s, mode=EscapeMode.HTML5, double_encode=True):
    """Escape ``& < > " '`` in *s* using the entities of *mode*.

    With ``double_encode=False`` an ampersand that already starts a
    character reference valid under *mode* is kept as it is, so escaping
    already escaped text is a no-op.
    """
    check_type("escape", 1, s, str, "string")
    table = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": mode.apos}
    if double_encode:
        return _re_special.sub(lambda m: table[m.group()], s)

    def replace(m):
        if m.group() == "&":
            ref = _re_entity_start.match(s, m.start())
            if ref and (ref.group(1) is None or mode.is_entity(ref.group(1))):
                return "&"
        return table[m.group()]

    return _re_special.sub(replace, s)


def unescape(s, mode=EscapeMode.HTML5):
    """Inverse of :func:`escape` for the same *mode*.

    Only the entities :func:`escape` can produce are decoded, in a single
    pass so that ``&amp;lt;`` comes back as ``&lt;``. HTML 4.01 has no
    ``&apos;`` entity, it is left untouched under that mode.
    """
    check_type("unescape", 1, s, str, "string")

    def replace(m):
        entity = m.group()
        if entity == "&apos;" and mode is EscapeMode.HTML401:
            return entity
        return _decoded.get(entity, "'")

    return _re_encoded.sub(replace, s)
