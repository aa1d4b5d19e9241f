import enum

from tagsmith.dtd import DocumentTypeDeclaration
from tagsmith.errors import InvalidArgument, InvalidProfile
from tagsmith.escaping import EscapeMode


class Profile(str, enum.Enum):
    """The HTML or XHTML dialect markup is rendered for.

    Members compare equal to their names, ``Profile.HTML5 == "html5"``.
    """

    HTML5 = "html5"
    HTML5_XML = "html5-xml"
    HTML4_STRICT = "html4-strict"
    HTML4_TRANS = "html4-trans"
    XHTML1_STRICT = "xhtml1-strict"
    XHTML1_TRANS = "xhtml1-trans"
    XHTML11 = "xhtml11"

    def __str__(self):
        return self.value

    @classmethod
    def coerce(cls, value, function_name="set_profile"):
        """Return the member for *value*, a member or a profile name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidArgument(function_name, 1, "string", value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidProfile(value, [p.value for p in cls]) from None

    @classmethod
    def from_doctype(cls, dtd_string):
        """Return the profile declared by a ``<!DOCTYPE ...>`` string, or None."""
        dtd = DocumentTypeDeclaration.matching(dtd_string)
        if dtd is None:
            return None
        return cls(dtd.name)

    @property
    def is_html5(self):
        return self in _HTML5_FAMILY

    @property
    def is_html4(self):
        return self in _HTML4_FAMILY

    @property
    def is_xml(self):
        return self in _XML_FAMILY

    @property
    def dtd(self):
        return DocumentTypeDeclaration.by_profile.get(self.value, DocumentTypeDeclaration.by_profile["html5"])

    @property
    def doctype(self):
        return str(self.dtd)

    @property
    def escape_mode(self):
        if self.is_html5:
            return EscapeMode.HTML5
        if self.is_xml:
            return EscapeMode.XHTML
        return EscapeMode.HTML401


_HTML5_FAMILY = frozenset({Profile.HTML5, Profile.HTML5_XML})
_HTML4_FAMILY = frozenset({Profile.HTML4_STRICT, Profile.HTML4_TRANS})
_XML_FAMILY = frozenset({Profile.HTML5_XML, Profile.XHTML11, Profile.XHTML1_STRICT, Profile.XHTML1_TRANS})
