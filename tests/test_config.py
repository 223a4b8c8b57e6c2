"""Tests for config and key binding persistence."""

import json

import pytest

from sramcompare.commands import COMMAND_NAMES
from sramcompare.config import (
    KeyBindings, create_key_bindings_file, get_config_file_path, load_auto_config,
    load_config, options_from_dict, save_config, validate_key_bindings,
)
from sramcompare.errors import ConfigError, KeyBindingError
from sramcompare.flags import ComparisonFlags, ExportFlags
from sramcompare.options import Options


class TestConfigFiles:
    def test_roundtrip(self, tmp_path):
        options = Options(
            current_file_path="game.srm",
            current_file_slot=2,
            comparison_flags=ComparisonFlags.SlotByteByByteComparison,
            export_flags=ExportFlags.OpenFile | ExportFlags.DeleteComp,
            ui_language="de-DE",
        )
        path = tmp_path / "cfg.json"
        save_config(options, str(path))
        assert load_config(str(path)) == options

    def test_flags_stored_by_name(self, tmp_path):
        options = Options(export_flags=ExportFlags.PromptName | ExportFlags.AppendLog)
        path = tmp_path / "cfg.json"
        save_config(options, str(path))
        data = json.loads(path.read_text())
        assert data["export_flags"] == ["PromptName", "AppendLog"]
        assert data["comparison_flags"] == []

    def test_unknown_keys_ignored(self):
        options = options_from_dict({"current_file_path": "a.srm", "window_size": 3})
        assert options.current_file_path == "a.srm"

    def test_invalid_flag(self):
        with pytest.raises(ConfigError):
            options_from_dict({"export_flags": ["Nope"]})

    def test_not_an_object(self):
        with pytest.raises(ConfigError):
            options_from_dict([1, 2])

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text("{broken")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_missing_keys_keep_defaults(self):
        options = options_from_dict({})
        assert options == Options()

    def test_failed_load_leaves_options_untouched(self):
        options = Options(current_file_path="game.srm", savestate_type="ppsspp")
        before = Options(current_file_path="game.srm", savestate_type="ppsspp")
        data = {"savestate_type": "zstd", "export_directory": "x", "comparison_flags": ["Bogus"]}
        with pytest.raises(ConfigError):
            options_from_dict(data, options)
        assert options == before

    def test_comma_separated_flag_string(self):
        options = options_from_dict({"comparison_flags": "HideValidationStatus, SlotByteByByteComparison"})
        assert options.comparison_flags == (ComparisonFlags.HideValidationStatus
                                            | ComparisonFlags.SlotByteByByteComparison)

    def test_numeric_flag_value(self):
        options = options_from_dict({"export_flags": 3})
        assert options.export_flags == ExportFlags(3)

    def test_null_flags_clear(self):
        options = options_from_dict({"export_flags": None})
        assert options.export_flags == ExportFlags(0)

    @pytest.mark.parametrize("data", [
        {"current_file_slot": "2"},
        {"comparison_file_slot": -1},
        {"current_file_slot": True},
        {"export_directory": 5},
        {"ui_language": ["en"]},
        {"log_flags": {"Export": True}},
    ])
    def test_field_types_checked(self, data):
        with pytest.raises(ConfigError):
            options_from_dict(data)

    def test_null_fields_allowed(self):
        options = options_from_dict({"current_file_slot": None, "export_directory": None})
        assert options == Options()


class TestConfigFilePath:
    def test_default(self):
        assert get_config_file_path(None) == "Config.json"

    def test_active_config(self):
        assert get_config_file_path("mine.json") == "mine.json"

    def test_name_without_extension(self):
        assert get_config_file_path("mine.json", "other") == "other.json"

    def test_name_with_extension(self):
        assert get_config_file_path(None, "other.cfg") == "other.cfg"


class TestAutoLoad:
    def test_follows_pointer(self, tmp_path):
        target = tmp_path / "session.json"
        save_config(Options(current_file_path="x.srm", current_file_slot=3), str(target))
        default = tmp_path / "Config.json"
        save_config(Options(config_file_path=str(target)), str(default))
        options = load_auto_config(str(default))
        assert options.current_file_slot == 3

    def test_disabled(self, tmp_path):
        default = tmp_path / "Config.json"
        save_config(Options(), str(default))
        assert load_auto_config(str(default)) is None

    def test_no_default_file(self, tmp_path):
        assert load_auto_config(str(tmp_path / "Config.json")) is None


class TestKeyBindings:
    def test_validate(self):
        bindings = validate_key_bindings({"CMP": "compare", "x": "Quit"}, COMMAND_NAMES)
        assert bindings == {"cmp": "Compare", "x": "Quit"}

    def test_duplicate_target_rejected(self):
        with pytest.raises(KeyBindingError):
            validate_key_bindings({"a": "Compare", "b": "Compare"}, COMMAND_NAMES)

    def test_duplicate_token_rejected(self):
        with pytest.raises(KeyBindingError):
            validate_key_bindings({"a": "Compare", "A": "Export"}, COMMAND_NAMES)

    def test_unknown_command_rejected(self):
        with pytest.raises(KeyBindingError):
            validate_key_bindings({"a": "Explode"}, COMMAND_NAMES)

    def test_lookup_is_lazy_and_case_insensitive(self, tmp_path):
        path = tmp_path / "KeyBindings.json"
        bindings = KeyBindings(str(path), COMMAND_NAMES)
        assert bindings.lookup("cmp") is None
        path.write_text(json.dumps({"Cmp": "Compare"}))
        assert bindings.lookup("CMP") == "Compare"

    def test_template_is_identity(self, tmp_path):
        path = tmp_path / "KeyBindings.json"
        create_key_bindings_file(str(path), COMMAND_NAMES)
        data = json.loads(path.read_text())
        assert data == {name: name for name in COMMAND_NAMES}
        assert KeyBindings(str(path), COMMAND_NAMES).lookup("quit") == "Quit"
