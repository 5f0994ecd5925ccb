from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


DEFAULT_SELF_CLOSERS: tuple[str, ...] = (
    "input",
    "img",
    "hr",
    "br",
    "meta",
    "link",
    "iframe",
)


def _normalize_tag(tag: Any) -> str:
    return str(tag).lower().strip()


class HtmlElement:
    """A single HTML element built up by chained mutations.

    Example:

        heading = HtmlElement("h2")
        heading.set("class", "heading-2").set_content("Heading Two")
        heading.render()  # '<h2 class="heading-2">Heading Two</h2>'

    Nested elements are rendered at the moment they are added, so the parent
    only ever holds markup:

        p = HtmlElement("p", HtmlElement("span", "the content"))
        str(p)  # '<p><span>the content</span></p>'

    Attribute values and content are emitted verbatim; nothing is escaped.
    """

    def __init__(
        self,
        tag: str,
        content: HtmlElement | str | None = None,
        *,
        self_closers: Iterable[str] = (),
    ) -> None:
        self._tag = _normalize_tag(tag)
        self._attributes: dict[str, Any] = {}
        self._content: str | None = None
        self._self_closers: list[str] = list(DEFAULT_SELF_CLOSERS)
        for name in self_closers:
            self.add_self_closer(name)
        if content:
            self.set_content(content)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def self_closers(self) -> tuple[str, ...]:
        return tuple(self._self_closers)

    @property
    def is_self_closing(self) -> bool:
        return self._tag in self._self_closers

    def add_self_closer(self, tag_name: str) -> HtmlElement:
        """Render `tag_name` as `<tag />` on this instance."""
        if tag_name not in self._self_closers:
            self._self_closers.append(tag_name)
        return self

    def set_content(self, content: HtmlElement | str | None) -> HtmlElement:
        self._content = ""
        return self.append_content(content)

    def append_content(self, content: HtmlElement | str | None) -> HtmlElement:
        if self._content is None:
            self._content = ""
        if isinstance(content, HtmlElement):
            self._content += content.render()
        elif content is not None:
            self._content += str(content)
        return self

    def get(self, attribute: str) -> Any:
        return self._attributes.get(attribute)

    def set(self, attribute: str | Mapping[str, Any], value: Any = "") -> HtmlElement:
        """Set one attribute, or merge a mapping of attributes.

        Existing keys keep their position; incoming values win.
        """
        if isinstance(attribute, Mapping):
            for key, item in attribute.items():
                self._attributes[key] = item
        else:
            self._attributes[attribute] = value
        return self

    def remove(self, attribute: str) -> HtmlElement:
        self._attributes.pop(attribute, None)
        return self

    def clear(self) -> HtmlElement:
        """Drop all attributes and reset content to unset."""
        self._attributes = {}
        self._content = None
        return self

    def build(self) -> str:
        parts = [f"<{self._tag}"]
        for key, value in self._attributes.items():
            parts.append(f' {key}="{value}"')
        if self.is_self_closing:
            parts.append(" />")
        elif self._content:
            parts.append(f">{self._content}</{self._tag}>")
        else:
            parts.append(f"></{self._tag}>")
        return "".join(parts)

    def render(self) -> str:
        return self.build()

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return (
            f"HtmlElement(tag={self._tag!r}, attributes={self._attributes!r}, "
            f"content={self._content!r})"
        )


def _normalize_attr_name(name: str) -> str:
    if name == "class_name":
        return "class"
    return name.replace("_", "-")


def el(tag: str, *children: Any, **attributes: Any) -> HtmlElement:
    node = HtmlElement(tag)
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            for item in child:
                if item is not None:
                    node.append_content(item)
        else:
            node.append_content(child)

    props: dict[str, Any] = {}
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        props[_normalize_attr_name(key)] = "" if value is True else value
    if props:
        node.set(props)
    return node
