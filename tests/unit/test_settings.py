"""Tests for extension settings, the settings manager and deprecated settings."""

from __future__ import annotations

import pytest

from rdebugger.config import get_settings
from rdebugger.config import reset_settings
from rdebugger.config import set_settings
from rdebugger.config import settings_context
from rdebugger.config import update_settings
from rdebugger.config.settings import ExtensionSettings
from rdebugger.config.settings import check_deprecated_settings
from rdebugger.config.settings import find_deprecated_settings
from rdebugger.errors import ConfigurationError
from rdebugger.host import InMemoryStateStore


class TestExtensionSettings:
    def test_defaults(self) -> None:
        settings = ExtensionSettings()

        assert settings.track_terminals is False
        assert settings.log_level == "INFO"
        assert settings.r_path == "R"
        settings.validate()

    def test_from_mapping(self) -> None:
        settings = ExtensionSettings.from_mapping(
            {
                "r.debugger.trackTerminals": True,
                "r.debugger.logLevel": "debug",
                "r.rterm.linux": "/opt/R/bin/R",
                "r.rterm.mac": "/opt/R/bin/R",
                "r.rterm.windows": "C:/R/bin/R.exe",
            }
        )

        assert settings.track_terminals is True
        assert settings.log_level == "DEBUG"
        assert settings.r_path in ("/opt/R/bin/R", "C:/R/bin/R.exe")

    def test_empty_rterm_falls_back_to_default(self) -> None:
        settings = ExtensionSettings.from_mapping({"r.rterm.linux": "", "r.rterm.mac": "", "r.rterm.windows": ""})
        assert settings.r_path == "R"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"log_level": "LOUD"},
            {"r_path": ""},
            {"r_path": None},
        ],
    )
    def test_validate_rejects(self, kwargs) -> None:
        with pytest.raises(ConfigurationError):
            ExtensionSettings(**kwargs).validate()


class TestSettingsManager:
    def test_set_and_reset(self) -> None:
        set_settings(ExtensionSettings(track_terminals=True))
        assert get_settings().track_terminals is True

        reset_settings()
        assert get_settings().track_terminals is False

    def test_set_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            set_settings(ExtensionSettings(log_level="NOISY"))  # type: ignore[arg-type]
        assert get_settings().log_level == "INFO"

    def test_update_ignores_unknown_keys(self) -> None:
        updated = update_settings(r_path="/usr/bin/R", colour="blue")

        assert updated.r_path == "/usr/bin/R"
        assert not hasattr(updated, "colour")

    def test_context_restores_previous_settings(self) -> None:
        with settings_context(log_level="DEBUG") as settings:
            assert settings.log_level == "DEBUG"
            assert get_settings().log_level == "DEBUG"

        assert get_settings().log_level == "INFO"


class TestDeprecatedSettings:
    def test_find_deprecated_settings(self) -> None:
        found = find_deprecated_settings(
            {"rdebugger.trackTerminals": True, "rdebugger.rterm.linux": None, "r.debugger.trackTerminals": True}
        )
        assert found == {"rdebugger.trackTerminals": "r.debugger.trackTerminals"}

    def test_acknowledgement_is_persisted(self) -> None:
        state = InMemoryStateStore()
        shown = []

        def notify(found):
            shown.append(found)
            return True

        assert check_deprecated_settings({"rdebugger.timeouts.startup": 500}, state, notify) is True
        assert state.get("ignoreDeprecatedConfig") is True

        # acknowledged once, never shown again
        check_deprecated_settings({"rdebugger.timeouts.startup": 500}, state, notify)
        assert len(shown) == 1

    def test_dismissed_notice_is_shown_again(self) -> None:
        state = InMemoryStateStore()

        assert check_deprecated_settings({"rdebugger.trackTerminals": False}, state, lambda found: False) is False
        assert state.get("ignoreDeprecatedConfig") is False

    def test_no_deprecated_settings_leaves_state_untouched(self) -> None:
        state = InMemoryStateStore()

        assert check_deprecated_settings({}, state) is False
        assert state.get("ignoreDeprecatedConfig") is None
