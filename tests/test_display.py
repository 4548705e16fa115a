"""Integration tests for the config display wrapper.

The wrapper flushes pending log records and delegates rendering to
lib_layered_config; rendering details are that library's concern.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from example_app.adapters.config.display import display_config
from example_app.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory({"demo": {"left": 5}})
    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"demo": {"message": "hi", "left": 5}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)
    output = capsys.readouterr().out

    assert "[demo]" in output
    assert 'message = "hi"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"arithmetic": {"overflow": "wrap32"}}, {})

    display_config(config, output_format=OutputFormat.JSON)
    output = capsys.readouterr().out

    assert '"arithmetic"' in output
    assert '"overflow": "wrap32"' in output


@pytest.mark.os_agnostic
def test_display_single_section_omits_the_others(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"demo": {"left": 5}, "arithmetic": {"overflow": "wrap64"}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="demo")
    output = capsys.readouterr().out

    assert "left" in output
    assert "wrap64" not in output
