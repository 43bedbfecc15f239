from __future__ import annotations

import pytest

from textcore.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_presets_are_known() -> None:
    assert sorted(telemetry.PRESETS) == ["development", "production", "quiet"]


def test_span_reraises_errors() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::failing", component=True, metadata={"n": 1}):
            raise KeyError("boom")


def test_span_handle_collects_metadata() -> None:
    with telemetry.span("test::ok", metadata={"line": 3}) as handle:
        handle.add_metadata("count", 2)

    assert handle.metadata == {"line": "3", "count": "2"}
