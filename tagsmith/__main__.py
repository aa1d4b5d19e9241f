"""Command-line interface to tagsmith to render a single element."""

import argparse
import logging
import sys

from tagsmith.profile import Profile
from tagsmith.renderer import DEFAULT_CHARSET, MarkupConfig, Renderer


def _attr_pair(pair):
    """Convert a NAME=VALUE string to a 2-tuple of (NAME, VALUE).

    A bare NAME is a boolean attribute and maps to ``True``.
    This is intended for usage with the type= argument to argparse.
    """
    name, sep, value = pair.partition("=")
    if not name:
        msg = f"Expected a NAME or NAME=VALUE pair, got {pair}"
        raise argparse.ArgumentTypeError(msg)
    return name, value if sep else True


def _collect_attrs(pairs):
    """Build the attribute map, repeated names become a list of values."""
    attrs = {}
    for name, value in pairs:
        if name not in attrs or value is True or attrs[name] is True:
            attrs[name] = value
        elif isinstance(attrs[name], list):
            attrs[name].append(value)
        else:
            attrs[name] = [attrs[name], value]
    return attrs


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-p",
        "--profile",
        choices=[p.value for p in Profile],
        default=Profile.HTML5.value,
        help="Output profile (default: %(default)s).",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=DEFAULT_CHARSET,
        help="Document charset (default: %(default)s).",
    )
    parser.add_argument(
        "-a",
        "--attr",
        action="append",
        dest="attrs",
        default=[],
        type=_attr_pair,
        metavar="NAME[=VALUE]",
        help="Attribute of the element, a bare NAME is a boolean attribute.",
    )
    parser.add_argument(
        "-d",
        "--doctype",
        action="store_true",
        help="Print the profile's doctype before the element.",
    )
    parser.add_argument(
        "-m",
        "--meta-charset",
        action="store_true",
        help="Print a meta charset tag before the element.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log rendering decisions to stderr.",
    )
    parser.add_argument(
        "tagname",
        help="Name of the element to render.",
    )
    parser.add_argument(
        "content",
        nargs="?",
        default="",
        help="Text content of the element, escaped on output.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        type=argparse.FileType("w"),
        default=sys.stdout,
        help="Output file.  If unspecified, use stdout.",
    )

    opts = parser.parse_args(argv)

    if opts.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    renderer = Renderer(MarkupConfig(opts.profile, opts.charset))
    lines = []
    if opts.doctype:
        lines.append(renderer.doctype())
    if opts.meta_charset:
        lines.append(renderer.get_meta_charset_tag())
    lines.append(renderer.tag(opts.tagname, opts.content, _collect_attrs(opts.attrs)))
    opts.output_file.write("\n".join(lines) + "\n")

    # Don't close stdout, just flush it instead.
    if opts.output_file is sys.stdout:
        opts.output_file.flush()
    else:
        opts.output_file.close()


if __name__ == "__main__":
    main(sys.argv[1:])  # pragma: no cover
