# SPDX-License-Identifier: MIT
"""htmlelement command line entrypoint.

Commands:
  render   Build one element from arguments and print or write it
  build    Render the description named in htmlelement.toml
  watch    Re-run build whenever the project directory changes
"""
import argparse
import importlib.metadata as metadata
import sys
from pathlib import Path

from .builder import _json_dumps, cmd_build
from .element import HtmlElement


def _get_version():
    """Return installed htmlelement version, with a dev fallback."""
    try:
        return metadata.version("htmlelement")
    except metadata.PackageNotFoundError:
        return "0.0.0-dev"


def _parse_attr(raw):
    """Split a NAME=VALUE flag; a bare NAME sets the empty value."""
    name, _, value = raw.partition("=")
    return name, value


def cmd_render(args):
    """CLI handler for `htmlelement render`."""
    element = HtmlElement(args.tag, self_closers=args.self_closer or [])
    if args.content is not None:
        element.set_content(args.content)
    for raw in args.attr or []:
        name, value = _parse_attr(raw)
        element.set(name, value)
    html = element.render()

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html, encoding="utf-8")
        bytes_written = len(html.encode("utf-8"))
        if args.json:
            payload = {
                "schema": "htmlelement.render.v1",
                "ok": True,
                "output": str(out_path),
                "bytes": bytes_written,
            }
            sys.stdout.write(_json_dumps(payload) + "\n")
        else:
            sys.stdout.write(f"[ok] wrote {out_path} ({bytes_written} bytes)\n")
        return

    if args.json:
        payload = {"schema": "htmlelement.render.v1", "ok": True, "html": html}
        sys.stdout.write(_json_dumps(payload) + "\n")
    else:
        sys.stdout.write(html + "\n")


def cmd_watch(args):
    """CLI handler for `htmlelement watch`."""
    # watchdog is only needed here
    from .watcher import watch

    watch(args)


def _build_parser():
    """Construct and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="htmlelement")
    parser.add_argument("--config", help="Path to htmlelement.toml")
    parser.add_argument("--version", action="version", version="htmlelement " + _get_version())
    parser.add_argument("--json", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser("render", help="Render a single element")
    p_render.add_argument("tag")
    p_render.add_argument("content", nargs="?")
    p_render.add_argument("--attr", action="append", metavar="NAME=VALUE",
                          help="Attribute to set (repeatable)")
    p_render.add_argument("--self-closer", action="append", metavar="TAG",
                          help="Extra tag to render as <tag /> (repeatable)")
    p_render.add_argument("--out", help="Write markup to this path instead of stdout")
    p_render.add_argument("--json", action="store_true")
    p_render.set_defaults(func=cmd_render)

    p_build = sub.add_parser("build", help="Render the configured element description")
    p_build.add_argument("--source", help="Description file (overrides build.source)")
    p_build.add_argument("--out", help="Output path (overrides build.output)")
    p_build.add_argument("--json", action="store_true")
    p_build.set_defaults(func=cmd_build)

    p_watch = sub.add_parser("watch", help="Rebuild when project files change")
    p_watch.add_argument("--source", help="Description file (overrides build.source)")
    p_watch.add_argument("--out", help="Output path (overrides build.output)")
    p_watch.set_defaults(func=cmd_watch, json=False)

    return parser


def main(argv=None):
    """Execute CLI command dispatch and standardized error handling."""
    argv = list(sys.argv[1:] if argv is None else argv)
    force_json = "--json" in argv

    parser = _build_parser()
    args = parser.parse_args(argv)
    if force_json:
        args.json = True
    try:
        args.func(args)
    except Exception as exc:
        if args.json:
            err = {
                "schema": "htmlelement.error.v1",
                "ok": False,
                "code": "CLI_ERROR",
                "message": str(exc),
            }
            sys.stdout.write(_json_dumps(err) + "\n")
        else:
            sys.stderr.write(f"[error] {exc}\n")
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
