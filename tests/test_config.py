import json
from pathlib import Path

import pytest

from logos_refs.config import PluginSettings, load_settings, save_settings


def test_defaults_match_plugin():
    settings = PluginSettings()
    assert settings.bible_translation == "esv"
    assert settings.retain_formatting is True
    assert settings.callout_title == "Logos Reference"
    assert settings.citation_counters == {}


def test_from_dict_accepts_camel_case_and_ignores_unknown_keys():
    settings = PluginSettings.from_dict(
        {
            "bibFolder": " Refs/ ",
            "autoDetectBibleVerses": True,
            "bibleTranslation": "niv",
            "citationCounters": {"Note.md": 3},
            "showRibbonIcon": False,
            "custom_callout_title": "Quote",
        }
    )
    assert settings.bib_folder == "Refs"
    assert settings.auto_detect_bible_verses is True
    assert settings.bible_translation == "niv"
    assert settings.citation_counters == {"Note.md": 3}
    assert settings.callout_title == "Quote"


def test_to_dict_round_trips_through_camel_case():
    settings = PluginSettings(include_refly_link=True, custom_metadata_fields=["tags"])
    data = settings.to_dict()
    assert data["includeReflyLink"] is True
    assert data["customMetadataFields"] == ["tags"]
    assert PluginSettings.from_dict(data) == settings


def test_metadata_fields_can_be_added_and_reordered():
    settings = PluginSettings()
    assert settings.add_metadata_field(" tags ")
    assert settings.add_metadata_field("status")
    assert not settings.add_metadata_field("tags")
    assert not settings.add_metadata_field("  ")
    settings.move_metadata_field(1, 0)
    assert settings.custom_metadata_fields == ["status", "tags"]


def test_load_and_save_settings(tmp_path: Path):
    path = tmp_path / "data.json"
    assert load_settings(path) == PluginSettings()

    save_settings(PluginSettings(citation_counters={"A.md": 2}), path)
    assert json.loads(path.read_text())["citationCounters"] == {"A.md": 2}
    assert load_settings(path).citation_counters == {"A.md": 2}


def test_load_settings_rejects_non_object(tmp_path: Path):
    path = tmp_path / "data.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_settings(path)


@pytest.mark.parametrize(
    "data",
    [
        {"bibFolder": None},
        {"includeReflyLink": "yes"},
        {"bibleTranslation": 3},
        {"citationCounters": {"Note.md": "2"}},
        {"customMetadataFields": ["tags", 1]},
    ],
)
def test_from_dict_rejects_mistyped_values(data):
    with pytest.raises(TypeError):
        PluginSettings.from_dict(data)
