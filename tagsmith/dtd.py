import re


class DocumentTypeDeclaration:
    """Represents a http://en.wikipedia.org/wiki/Document_Type_Declaration

    Every output profile has exactly one DTD, registered in
    :attr:`.by_profile` under the profile name. A DTD can also be looked
    up from the literal declaration found in existing markup using
    :meth:`.matching`:

    >>> from tagsmith.dtd import DocumentTypeDeclaration
    >>> dtd = DocumentTypeDeclaration.by_profile["html4-trans"]
    >>> dtd.uri
    'http://www.w3.org/TR/html4/loose.dtd'
    >>> match = DocumentTypeDeclaration.matching(
    ...     '<!doctype HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
    ...     '"http://www.w3.org/TR/html4/loose.dtd">'
    ... )
    >>> match.name
    'html4-trans'
    """

    def __init__(self, name, fpi="", uri="", root_element="html", kind="PUBLIC"):
        """*fpi* is the Formal Public Identifier."""
        self.name = name
        self.fpi = fpi
        self.uri = uri
        self.root_element = root_element
        assert kind in (  # noqa: S101
            "PUBLIC",
            "SYSTEM",
            "",
        ), '*kind* can be either "PUBLIC", "SYSTEM", or empty.'
        self.kind = kind
        self._cached_str = None

        self.regex = re.compile(re.escape(str(self)).replace(r"\ ", r"\s+"), flags=re.IGNORECASE)

    def __str__(self):
        if not self._cached_str:
            alist = ["<!DOCTYPE"]
            alist.append(self.root_element)
            if self.kind:
                alist.append(self.kind)
            if self.fpi:
                alist.append('"' + self.fpi + '"')
            if self.uri:
                alist.append('"' + self.uri + '"')
            self._cached_str = " ".join(alist) + ">"
        return self._cached_str

    def __repr__(self):
        return f"<DocumentTypeDeclaration {self.name!r}>"

    by_profile = {}  # noqa: RUF012

    @classmethod
    def matching(cls, dtd_string):
        """Looks up the known DTDs and returns the instance that matches the
        provided dtd_string.

        ``html5`` and ``html5-xml`` share a declaration, the first one
        registered (``html5``) wins.
        """
        for dtd in cls.by_profile.values():
            if dtd.regex.match(dtd_string.strip()):
                return dtd
        return None

    REGEX = re.compile(r"<!DOCTYPE[^>]+>", flags=re.IGNORECASE)  # This matches any DTD.


for dtd in (
    DocumentTypeDeclaration("html5", kind=""),
    DocumentTypeDeclaration("html5-xml", kind=""),
    DocumentTypeDeclaration(
        "xhtml11",
        "-//W3C//DTD XHTML 1.1//EN",
        "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd",
    ),
    DocumentTypeDeclaration(
        "xhtml1-strict",
        "-//W3C//DTD XHTML 1.0 Strict//EN",
        "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd",
    ),
    DocumentTypeDeclaration(
        "xhtml1-trans",
        "-//W3C//DTD XHTML 1.0 Transitional//EN",
        "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd",
    ),
    DocumentTypeDeclaration(
        "html4-strict",
        "-//W3C//DTD HTML 4.01//EN",
        "http://www.w3.org/TR/html4/strict.dtd",
    ),
    DocumentTypeDeclaration(
        "html4-trans",
        "-//W3C//DTD HTML 4.01 Transitional//EN",
        "http://www.w3.org/TR/html4/loose.dtd",
    ),
):
    DocumentTypeDeclaration.by_profile[dtd.name] = dtd

XML_DECLARATION = re.compile(r"<\?xml .*?\?>")


def extract_dtd(markup):
    """Lookup the DTD in the provided markup code.

    Tries to find any DTD in the string *markup* and returns a tuple
    (dtd_string, position, markup_without_the_DTD). Note the first of
    these values might be an empty string:

    >>> markup = '<?xml version="1.0"?><!DOCTYPE html><html><body></body></html>'
    >>> dtd, dtd_pos, markup_without_dtd = extract_dtd(markup)
    >>> print(dtd)
    <!DOCTYPE html>
    >>> print(dtd_pos)
    21
    >>> print(markup_without_dtd)
    <?xml version="1.0"?><html><body></body></html>

    >>> markup = '<?xml version="1.0" encoding="UTF-8"?><html><body></body></html>'
    >>> dtd, dtd_pos, markup_without_dtd = extract_dtd(markup)
    >>> print(dtd)
    <BLANKLINE>
    >>> print(dtd_pos)
    38
    >>> print(markup_without_dtd == markup)
    True
    """
    match = DocumentTypeDeclaration.REGEX.search(markup)
    if not match:
        decl_match = XML_DECLARATION.match(markup)
        if decl_match:
            # A DTD may only follow the <?xml ...?> declaration.
            return "", decl_match.end(), markup
        return "", 0, markup
    found = match.group()
    return found, match.start(), markup.replace(found, "", 1)
