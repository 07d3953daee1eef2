"""Shared fixtures."""

import pytest

from fitch.utils.config import Config

QUIET_CONFIG = """
display:
  width: 70
  unicode: true
  clear_screen: false
repl:
  prompt: "fitch> "
  greeting: false
  show_after_command: false
latex:
  preamble: false
logging:
  level: WARNING
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "fitch.yaml"
    path.write_text(QUIET_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def quiet_config(config_path):
    """A configuration that does not echo the proof after every command."""
    return Config(config_path)
