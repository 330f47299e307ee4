"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from sizematch.config import CheckConfig, CountAssertion, NotCountAssertion, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "checks.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_load_minimal_config(tmp_yaml):
    path = tmp_yaml("""\
        assertions:
          - count: 3
    """)
    cfg = load_config(path)
    assert cfg.verbose is False
    assert cfg.debug_log is None
    assert [a.model_dump() for a in cfg.assertions] == [{"count": 3, "weight": 1.0}]


def test_load_config_assertion_types(tmp_yaml):
    path = tmp_yaml("""\
        assertions:
          - count: 2
            weight: 2.0
          - not_count: 0
    """)
    cfg = load_config(path)
    assert isinstance(cfg.assertions[0], CountAssertion)
    assert cfg.assertions[0].weight == 2.0
    assert isinstance(cfg.assertions[1], NotCountAssertion)


def test_relative_debug_log_resolved_against_config_dir(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        verbose: true
        debug_log: logs/debug.log
        assertions:
          - count: 1
    """)
    cfg = load_config(path)
    assert cfg.verbose is True
    assert cfg.debug_log == str((tmp_path / "logs" / "debug.log").resolve())


def test_absolute_debug_log_kept(tmp_yaml, tmp_path):
    log = tmp_path / "abs.log"
    path = tmp_yaml(f"""\
        debug_log: {log}
        assertions:
          - count: 1
    """)
    assert load_config(path).debug_log == str(log)


def test_empty_assertions_rejected(tmp_yaml):
    path = tmp_yaml("""\
        assertions: []
    """)
    with pytest.raises(ValidationError, match="assertions must not be empty"):
        load_config(path)


def test_empty_file_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml(""))


def test_negative_count_rejected():
    with pytest.raises(ValidationError):
        CountAssertion(count=-1)


def test_unknown_assertion_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(assertions=[{"size": 3}])


def test_unknown_top_level_key_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(assertions=[{"count": 1}], colour="red")


def _example_configs() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[1]
    examples_dir = repo_root / "examples"
    return sorted(p for p in examples_dir.glob("*.yaml") if p.is_file())


@pytest.mark.parametrize("path", _example_configs(), ids=lambda p: p.name)
def test_example_configs_load(path):
    cfg = load_config(path)
    assert cfg.assertions
