HTML_EMPTY_TAGS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param"})

BLOCK = "block"
INLINE = "inline"

# Elements introduced by HTML5 and the generic container each one falls
# back to when rendering for an older profile.
HTML5_ELEMENTS = {
    "article": BLOCK,
    "aside": BLOCK,
    "details": BLOCK,
    "figcaption": BLOCK,
    "figure": BLOCK,
    "header": BLOCK,
    "hgroup": BLOCK,
    "footer": BLOCK,
    "nav": BLOCK,
    "section": BLOCK,
    "summary": BLOCK,
    "time": INLINE,
    "mark": INLINE,
    "meter": INLINE,
    "progress": INLINE,
    "data": INLINE,
}

FALLBACK_TAGS = {BLOCK: "div", INLINE: "span"}


def is_empty_tag(tagname):
    return tagname.lower() in HTML_EMPTY_TAGS


def downgrade(tagname):
    """Return ``(tagname, class_name)`` for a pre-HTML5 document.

    HTML5-only elements are swapped for a ``div`` or a ``span`` and the
    original name is returned so it can be kept as a class. Any other
    tag is returned unchanged with an empty class name.
    """
    category = HTML5_ELEMENTS.get(tagname.lower())
    if category is None:
        return tagname, ""
    return FALLBACK_TAGS[category], tagname
