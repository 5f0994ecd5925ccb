# SPDX-License-Identifier: MIT
import warnings
from pathlib import Path
from typing import Dict, List, Optional, Any
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .element import HtmlElement

CONFIG_FILENAME = "htmlelement.toml"

# Default configuration structure
DEFAULT_CONFIG = {
    "build": {
        "source": "element.toml",
        "output": "dist/element.html",
    },
    "element": {
        "self_closers": [],  # Extra tags rendered as <tag />
    },
}


class ConfigWarning(UserWarning):
    """Warning emitted for config entries that are skipped."""


class Config:
    def __init__(self, data: Dict[str, Any], path: Path):
        self.data = data
        self.path = path
        self.root = path.parent

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from htmlelement.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
            if not path.exists():
                raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}. Pass --config to point at one.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ValueError(f"Failed to parse {path}: {e}")

        return cls(data, Path(path))

    @property
    def project(self) -> Dict[str, Any]:
        return self.data.get("project", {})

    @property
    def build(self) -> Dict[str, Any]:
        return self.data.get("build", {})

    @property
    def element(self) -> Dict[str, Any]:
        return self.data.get("element", {})

    def resolve_path(self, relative_path: str) -> Path:
        return self.root / relative_path

    def get_source_path(self) -> Path:
        return self.resolve_path(self.build.get("source", DEFAULT_CONFIG["build"]["source"]))

    def get_output_path(self) -> Path:
        return self.resolve_path(self.build.get("output", DEFAULT_CONFIG["build"]["output"]))

    def get_self_closers(self) -> List[str]:
        raw = self.element.get("self_closers", DEFAULT_CONFIG["element"]["self_closers"])
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise ValueError(f"element.self_closers in {self.path} must be a list of tag names")
        names = []
        for item in raw:
            if not isinstance(item, str):
                warnings.warn(f"Skipping non-string self closer {item!r} in {self.path}", ConfigWarning, stacklevel=2)
                continue
            names.append(item)
        return names

    def new_element(self, tag: str, content: Any = None) -> HtmlElement:
        """Create an element with this project's self closers registered on it."""
        return HtmlElement(tag, content, self_closers=self.get_self_closers())
