from __future__ import annotations

import sys
from typing import Union, cast

import docopt
from typing_extensions import TypedDict

from uriref import __version__
from uriref.codec import encode, encode_component, percent_decode
from uriref.exceptions import UriError
from uriref.uri import Uri, parse

# - Assign doc to DOC to keep it if python -OO is used (which strips docstrings)
# - We format spaces into blank lines to work around a bug in docopt-ng's usage
#   parser.
USAGE = """\
usage: uriref [options] parse <uri>
       uriref [options] resolve [--non-strict] <base> <reference>
       uriref [options] encode [--component] <text>
       uriref [options] decode <text>
       uriref --help\
"""

__doc__ = DOC = f"""
Parse, resolve and percent-encode URI references according to RFC 3986.

{USAGE}

commands:
    parse
        Print the components of <uri>, one per line.
{" "}
    resolve
        Resolve the URI-reference <reference> against the URI <base> and print
        the resulting URI.
{" "}
    encode
        Percent-encode the characters of <text> which can't appear in a URI.
{" "}
    decode
        Replace %XX escapes in <text> with the characters they encode.

options:
    --non-strict
        Treat a <reference> with the same scheme as <base> as if it had no
        scheme, as some older URI parsers do.
{" "}
    --component
        Also encode characters which are delimiters in URIs, such as / ? # &
        and =, for use in a single path segment or query value.
{" "}
    --traceback
        Print the Python traceback on errors.
{" "}
    --version
        Print the version and exit.
{" "}
    --help, -h
        Show this help.
"""

ParsedArgs = TypedDict(
    "ParsedArgs",
    {
        "parse": bool,
        "resolve": bool,
        "encode": bool,
        "decode": bool,
        "<uri>": Union[str, None],
        "<base>": Union[str, None],
        "<reference>": Union[str, None],
        "<text>": Union[str, None],
        "--non-strict": bool,
        "--component": bool,
        "--traceback": bool,
        "--version": bool,
        "--help": bool,
        "-h": bool,
    },
)


def _parse_arg(text: str | None, name: str) -> Uri:
    assert isinstance(text, str)
    uri = parse(text)
    if uri is None:
        raise UriError(f"The {name} provided is not a valid URI-reference: {text}")
    return uri


def describe(uri: Uri) -> str:
    """
    Format the components of uri as ``name: value`` lines. Absent components
    are left out.
    """
    fields = [
        ("scheme", uri.scheme),
        ("user-info", uri.user_info),
        ("host", uri.host),
        ("port", uri.port),
        ("path", uri.path),
        ("query", uri.query),
        ("fragment", uri.fragment),
        ("authority", uri.authority),
    ]
    return "".join(f"{name}: {value}\n" for name, value in fields if value is not None)


def _main(args: ParsedArgs) -> None:
    if args["parse"]:
        uri = _parse_arg(args["<uri>"], "<uri>")
        sys.stdout.write(describe(uri))
        return

    if args["resolve"]:
        base = _parse_arg(args["<base>"], "<base>")
        if not base.is_absolute:
            raise UriError(
                f"The <base> provided is not an absolute URI: {args['<base>']}"
            )
        reference = _parse_arg(args["<reference>"], "<reference>")
        print(base.resolve_uri(reference, strict=not args["--non-strict"]))
        return

    assert isinstance(args["<text>"], str)
    text = args["<text>"]
    if args["encode"]:
        print(encode_component(text) if args["--component"] else encode(text))
    else:
        print(percent_decode(text))


def main(argv: list[str] | None = None) -> None:
    try:
        args = cast(ParsedArgs, docopt.docopt(DOC, version=__version__, argv=argv))
    except docopt.DocoptExit as e:
        if e.code:
            # docopt-ng's own messages for unknown options are confusing, so
            # print the usage with a message of our own.
            print(
                f"""\
uriref couldn't understand the command line options it received. Run again \
with --help for more info.

{USAGE}
""",
                file=sys.stderr,
                end="",
            )
            raise SystemExit(1) from e
        raise e
    try:
        _main(args)
    except UriError as e:
        print(f"fatal: {e}", file=sys.stderr)

        if args["--traceback"]:
            import traceback

            print("\n--traceback on, full traceback follows:\n", file=sys.stderr)
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    main()
