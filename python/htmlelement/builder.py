# SPDX-License-Identifier: MIT
"""Build elements from JSON/TOML descriptions.

A description is a mapping with a required `tag` plus optional `content`,
`attributes`, `children` and `self_closers`:

    {
        "tag": "ul",
        "attributes": {"class": "menu"},
        "children": [
            {"tag": "li", "content": "One"},
            {"tag": "li", "content": "Two"}
        ]
    }

Children are rendered into their parent as they are built.
"""
from __future__ import annotations

import json
import sys
import warnings
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .config import Config
from .element import HtmlElement


DESCRIPTION_KEYS = frozenset({"tag", "content", "attributes", "children", "self_closers"})


class DescriptionWarning(UserWarning):
    """Warning emitted for ignored parts of an element description."""


def _warn(msg: str) -> None:
    warnings.warn(msg, DescriptionWarning, stacklevel=3)


def _json_dumps(payload: Any) -> str:
    """JSON serialize payload using CLI defaults."""
    return json.dumps(payload, ensure_ascii=True, default=str)


def _local_self_closers(raw: Any, tag: str) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise ValueError(f"'self_closers' of <{tag}> must be a list")
    names = []
    for item in raw:
        if not isinstance(item, str):
            _warn(f"Skipping non-string self closer {item!r} in description of <{tag}>")
            continue
        names.append(item)
    return names


def element_from_mapping(
    data: Mapping[str, Any],
    *,
    self_closers: Iterable[str] = (),
) -> HtmlElement:
    if not isinstance(data, Mapping):
        raise ValueError(f"Element description must be a mapping, got {type(data).__name__}")

    tag = data.get("tag")
    if not isinstance(tag, str) or not tag.strip():
        raise ValueError(f"Element description requires a non-empty 'tag': {dict(data)!r}")

    for key in data:
        if key not in DESCRIPTION_KEYS:
            _warn(f"Ignoring unknown key {key!r} in description of <{tag}>")

    inherited = list(self_closers)
    local = _local_self_closers(data.get("self_closers"), tag)
    node = HtmlElement(tag, self_closers=[*inherited, *local])

    content = data.get("content")
    if content is not None:
        node.set_content(content)

    attributes = data.get("attributes")
    if attributes is not None:
        if not isinstance(attributes, Mapping):
            raise ValueError(f"'attributes' of <{tag}> must be a mapping")
        node.set(attributes)

    children = data.get("children")
    if children is not None:
        if not isinstance(children, list):
            raise ValueError(f"'children' of <{tag}> must be a list")
        for child in children:
            if isinstance(child, Mapping):
                node.append_content(element_from_mapping(child, self_closers=inherited))
            else:
                node.append_content(child)
    return node


def load_description(path: str | Path) -> dict[str, Any]:
    source = Path(path)
    suffix = source.suffix.lower()
    if suffix not in {".json", ".toml"}:
        raise ValueError(f"Unsupported description format {suffix or '(none)'!r}: {source}")
    try:
        if suffix == ".json":
            data = json.loads(source.read_text(encoding="utf-8"))
        else:
            with open(source, "rb") as f:
                data = tomllib.load(f)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Failed to parse {source}: {e}")

    if isinstance(data, dict) and "tag" not in data and isinstance(data.get("element"), dict):
        data = data["element"]
    if not isinstance(data, dict):
        raise ValueError(f"Description root in {source} must be a mapping")
    return data


def render_description(path: str | Path, *, self_closers: Iterable[str] = ()) -> str:
    return element_from_mapping(load_description(path), self_closers=self_closers).render()


def cmd_build(args):
    """Render the configured description to the configured output file."""
    config_path = Path(args.config) if args.config else None
    config = Config.load(config_path)

    if not args.json:
        sys.stdout.write(f"[build] Loading config from {config.path}\n")

    source = Path(args.source) if getattr(args, "source", None) else config.get_source_path()
    out_path = Path(args.out) if getattr(args, "out", None) else config.get_output_path()

    html = render_description(source, self_closers=config.get_self_closers())

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")
    bytes_written = len(html.encode("utf-8"))

    if args.json:
        result = {
            "schema": "htmlelement.build.v1",
            "ok": True,
            "source": str(source),
            "output": str(out_path),
            "bytes": bytes_written,
        }
        sys.stdout.write(_json_dumps(result) + "\n")
    else:
        sys.stdout.write(f"[ok] wrote {out_path} ({bytes_written} bytes)\n")
    return out_path
