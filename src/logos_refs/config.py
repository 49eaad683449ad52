"""User settings for pasting Logos references into notes."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)

SUPPORTED_TRANSLATIONS = {
    "niv": "NIV",
    "esv": "ESV",
    "nasb": "NASB",
    "lsb": "LSB",
    "nlt": "NLT",
}

DEFAULT_CALLOUT_TITLE = "Logos Reference"


@dataclass
class PluginSettings:
    """Settings mirroring the plugin's ``data.json``."""

    bib_folder: str = ""
    citation_counters: Dict[str, int] = field(default_factory=dict)
    custom_callout_title: str = ""
    append_references_to_title: bool = False
    add_new_line_before_link: bool = False
    add_new_line_after_callout: bool = False
    include_refly_link: bool = False
    auto_detect_bible_verses: bool = False
    bible_translation: str = "esv"
    use_custom_metadata: bool = False
    custom_metadata_fields: List[str] = field(default_factory=list)
    retain_formatting: bool = True

    def __post_init__(self) -> None:
        self.bib_folder = self.bib_folder.strip().rstrip("/")

    @property
    def callout_title(self) -> str:
        return self.custom_callout_title or DEFAULT_CALLOUT_TITLE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PluginSettings":
        """Build settings from camelCase or snake_case keys, ignoring unknown ones.

        Raises ``TypeError`` when a known key holds a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        defaults = cls()
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name not in known:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            expected = type(getattr(defaults, name))
            if not isinstance(value, expected):
                raise TypeError(
                    f"Setting {key!r} must be of type {expected.__name__}, got {type(value).__name__}"
                )
            values[name] = value
        counters = dict(values.get("citation_counters", {}))
        for key, count in counters.items():
            if isinstance(count, bool) or not isinstance(count, int):
                raise TypeError(f"Citation counter {key!r} must be an integer")
        metadata = list(values.get("custom_metadata_fields", []))
        if not all(isinstance(item, str) for item in metadata):
            raise TypeError("Custom metadata fields must be strings")
        values["citation_counters"] = counters
        values["custom_metadata_fields"] = metadata
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {_camel_case(f.name): getattr(self, f.name) for f in fields(self)}

    def add_metadata_field(self, name: str) -> bool:
        """Append a front matter key; returns False for blanks and duplicates."""
        name = name.strip()
        if not name or name in self.custom_metadata_fields:
            return False
        self.custom_metadata_fields.append(name)
        return True

    def move_metadata_field(self, from_index: int, to_index: int) -> None:
        fields_ = self.custom_metadata_fields
        fields_.insert(to_index, fields_.pop(from_index))


def _snake_case(key: str) -> str:
    return "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in key)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def load_settings(path: str | Path) -> PluginSettings:
    """Read settings from a JSON file; a missing file yields the defaults."""
    settings_path = Path(path)
    if not settings_path.exists():
        return PluginSettings()
    data = json.loads(settings_path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} must contain a JSON object")
    return PluginSettings.from_dict(data)


def save_settings(settings: PluginSettings, path: str | Path) -> None:
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2))
