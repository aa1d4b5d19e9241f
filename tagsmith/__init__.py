"""tagsmith public API.

The module level functions render with one process-wide configuration,
html5 and UTF-8 unless changed with :func:`set_profile` and
:func:`set_charset`::

    >>> import tagsmith
    >>> tagsmith.set_profile("html4-strict")
    >>> tagsmith.tag("article", "Hi", {"id": "intro"})
    '<div id=intro class=article>Hi</div>'

Code that renders for several profiles at once should use its own
:class:`Renderer` instead of changing the shared configuration.
"""

import logging
from contextlib import contextmanager

from tagsmith.dtd import DocumentTypeDeclaration, extract_dtd
from tagsmith.errors import InvalidArgument, InvalidProfile, TagsmithError, check_type
from tagsmith.escaping import EscapeMode
from tagsmith.profile import Profile
from tagsmith.renderer import MarkupConfig, Renderer
from tagsmith.version import __release__, __version__

log = logging.getLogger(__name__)

_renderer = Renderer()


def get_config():
    return _renderer.config


def _configure(config):
    global _renderer
    _renderer = Renderer(config)


def set_profile(profile=Profile.HTML5):
    """Select the profile used by every module level function."""
    profile = Profile.coerce(profile, "set_profile")
    log.debug("Switching output profile to %s", profile)
    _configure(get_config().replace(profile=profile))


def get_profile():
    return _renderer.profile


def set_charset(charset):
    check_type("set_charset", 1, charset, str, "string")
    log.debug("Switching charset to %s", charset)
    _configure(get_config().replace(charset=charset))


def get_charset():
    return _renderer.charset


@contextmanager
def configured(profile=None, charset=None):
    """Temporarily change the process-wide profile and/or charset.

    The previous configuration is restored on exit, even on error.
    """
    previous = get_config()
    changes = {}
    if profile is not None:
        changes["profile"] = Profile.coerce(profile, "configured")
    if charset is not None:
        changes["charset"] = charset
    _configure(previous.replace(**changes))
    try:
        yield _renderer
    finally:
        _configure(previous)


def is_html5():
    return _renderer.is_html5()


def is_html4():
    return _renderer.is_html4()


def is_xml():
    return _renderer.is_xml()


def doctype():
    return _renderer.doctype()


def get_escape_mode():
    return _renderer.get_escape_mode()


def escape(s, double_encode=True):
    return _renderer.escape(s, double_encode)


def unescape(s):
    return _renderer.unescape(s)


def attrs(attrs=None):
    return _renderer.attrs(attrs)


render_attrs = attrs


def open_tag(tagname, attrs=None):
    return _renderer.open_tag(tagname, attrs)


def close_tag(tagname):
    return _renderer.close_tag(tagname)


def tag(tagname, content="", attrs=None):
    return _renderer.tag(tagname, content, attrs)


def get_http_content_type_header():
    return _renderer.get_http_content_type_header()


def get_meta_charset_tag():
    return _renderer.get_meta_charset_tag()


def detect_profile(markup):
    return _renderer.detect_profile(markup)


__all__ = [
    "DocumentTypeDeclaration",
    "EscapeMode",
    "InvalidArgument",
    "InvalidProfile",
    "MarkupConfig",
    "Profile",
    "Renderer",
    "TagsmithError",
    "attrs",
    "close_tag",
    "configured",
    "detect_profile",
    "doctype",
    "escape",
    "extract_dtd",
    "get_charset",
    "get_config",
    "get_escape_mode",
    "get_http_content_type_header",
    "get_meta_charset_tag",
    "get_profile",
    "is_html4",
    "is_html5",
    "is_xml",
    "open_tag",
    "render_attrs",
    "set_charset",
    "set_profile",
    "tag",
    "unescape",
    "__version__",
    "__release__",
]
