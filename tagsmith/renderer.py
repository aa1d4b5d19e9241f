import dataclasses
import logging
from tagsmith import attributes
from tagsmith import escaping
from tagsmith.dtd import extract_dtd
from tagsmith.errors import check_type
from tagsmith.html_utils import downgrade, is_empty_tag
from tagsmith.profile import Profile

log = logging.getLogger(__name__)

DEFAULT_CHARSET = "UTF-8"


@dataclasses.dataclass(frozen=True)
class MarkupConfig:
    """The output profile and charset markup is rendered with."""

    profile: Profile = Profile.HTML5
    charset: str = DEFAULT_CHARSET

    def __post_init__(self):
        object.__setattr__(self, "profile", Profile.coerce(self.profile, "MarkupConfig"))
        check_type("MarkupConfig", 2, self.charset, str, "string")

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)


class Renderer:
    """Renders tags, attributes and text for one :class:`MarkupConfig`.

    A renderer never changes once built, so a single instance can be
    shared between threads::

        >>> r = Renderer.for_profile("xhtml11")
        >>> r.tag("input", attrs={"autofocus": True})
        '<input autofocus="autofocus" />'
    """

    def __init__(self, config=None):
        if config is None:
            config = MarkupConfig()
        self.config = check_type("Renderer", 1, config, MarkupConfig, "MarkupConfig")

    @classmethod
    def for_profile(cls, profile, charset=DEFAULT_CHARSET):
        return cls(MarkupConfig(profile, charset))

    def __repr__(self):
        return f"<Renderer {self.profile} {self.charset}>"

    @property
    def profile(self):
        return self.config.profile

    @property
    def charset(self):
        return self.config.charset

    def is_html5(self):
        return self.profile.is_html5

    def is_html4(self):
        return self.profile.is_html4

    def is_xml(self):
        return self.profile.is_xml

    def doctype(self):
        return self.profile.doctype

    def get_escape_mode(self):
        return self.profile.escape_mode

    def escape(self, s, double_encode=True):
        return escaping.escape(s, self.get_escape_mode(), double_encode)

    def unescape(self, s):
        return escaping.unescape(s, self.get_escape_mode())

    def attrs(self, attrs=None):
        return attributes.render_attrs(attrs, self.profile, "attrs")

    render_attrs = attrs

    def tagname(self, tagname):
        return tagname.lower() if self.is_xml() else tagname

    def open_tag(self, tagname, attrs=None):
        """Return the opening tag, self-closed for empty tags in XML profiles."""
        check_type("open_tag", 1, tagname, str, "string")
        return self._open_tag(tagname, attrs, "open_tag", 2)

    def _open_tag(self, tagname, attrs, function_name, position):
        rendered = attributes.render_attrs(attrs, self.profile, function_name, position)
        close_self = " /" if self.is_xml() and is_empty_tag(tagname) else ""
        return "<" + self.tagname(tagname) + rendered + close_self + ">"

    def close_tag(self, tagname):
        """Return the closing tag, or an empty string for empty tags."""
        check_type("close_tag", 1, tagname, str, "string")
        if is_empty_tag(tagname):
            return ""
        return "</" + self.tagname(tagname) + ">"

    def tag(self, tagname, content="", attrs=None):
        """Return a complete element with its escaped content.

        HTML5-only elements are rendered as a ``div`` or ``span`` carrying
        the original name as a class when the profile predates HTML5.
        Empty tags never carry content.
        """
        check_type("tag", 1, tagname, str, "string")
        check_type("tag", 2, content, str, "string")
        attributes.check_attrs(attrs, "tag", 3)

        if not self.is_html5():
            tagname, class_name = downgrade(tagname)
            if class_name:
                log.debug("Rendering %s as %s for profile %s", class_name, tagname, self.profile)
                attrs = _with_class(attrs, class_name)

        body = "" if is_empty_tag(tagname) else self.escape(content)
        return self._open_tag(tagname, attrs, "tag", 3) + body + self.close_tag(tagname)

    def get_http_content_type_header(self):
        return "text/html; charset=" + self.charset.lower()

    def get_meta_charset_tag(self):
        return self.open_tag("meta", {"charset": self.charset.lower()})

    def detect_profile(self, markup):
        """Return the profile declared by the doctype of *markup*, or None."""
        check_type("detect_profile", 1, markup, str, "string")
        dtd, _, _ = extract_dtd(markup)
        if not dtd:
            return None
        return Profile.from_doctype(dtd)


def _with_class(attrs, class_name):
    """Return a copy of the validated *attrs* with *class_name* appended to its class."""
    attrs = dict(attrs or {})
    key = next((k for k in attrs if k.lower() == "class"), "class")
    current = attrs.get(key)
    if isinstance(current, str):
        attrs[key] = current + " " + class_name
    elif isinstance(current, (list, tuple)):
        attrs[key] = [*current, class_name]
    else:
        attrs[key] = class_name
    return attrs
