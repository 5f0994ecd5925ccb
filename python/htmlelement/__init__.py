# SPDX-License-Identifier: MIT
"""Build HTML elements programmatically and render them to markup.

    from htmlelement import HtmlElement

    heading = HtmlElement("h2", "Heading Two").set("class", "heading-2")
    str(heading)  # '<h2 class="heading-2">Heading Two</h2>'
"""
from .element import DEFAULT_SELF_CLOSERS, HtmlElement, el
from .builder import DescriptionWarning, element_from_mapping, load_description, render_description
from .config import Config, ConfigWarning

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SELF_CLOSERS",
    "HtmlElement",
    "el",
    "DescriptionWarning",
    "element_from_mapping",
    "load_description",
    "render_description",
    "Config",
    "ConfigWarning",
]
