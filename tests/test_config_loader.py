import pytest

from costar.analysis.utils.config_loader import (
    DEFAULT_REFERENCE_NODE,
    ENV_BASELINE,
    ENV_REFERENCE_NODE,
    load_reference_config,
    parse_baseline,
    parse_reference_node,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(ENV_REFERENCE_NODE, raising=False)
    monkeypatch.delenv(ENV_BASELINE, raising=False)


def _write_ini(base, text):
    cfg = base / "config"
    cfg.mkdir(parents=True)
    (cfg / "reference.ini").write_text(text, encoding="utf-8")


def test_defaults():
    cfg = load_reference_config()
    assert cfg.reference_node == DEFAULT_REFERENCE_NODE
    assert cfg.baseline == pytest.approx(1319167 / 503944)
    assert cfg.source == "reference_node=default, baseline=default"


def test_parse_baseline_forms():
    assert parse_baseline("3/2") == pytest.approx(1.5)
    assert parse_baseline("2.25") == pytest.approx(2.25)
    assert parse_baseline(4) == 4.0


@pytest.mark.parametrize("bad", ["abc", "1/0", "0", "-2", ""])
def test_parse_baseline_rejects(bad):
    with pytest.raises(ValueError):
        parse_baseline(bad)


def test_parse_reference_node_rejects():
    with pytest.raises(ValueError):
        parse_reference_node("x")
    with pytest.raises(ValueError):
        parse_reference_node("-3")


def test_ini_file(tmp_path):
    _write_ini(tmp_path, "# comment\nreference_node: 7\nbaseline: 5/2\n")
    cfg = load_reference_config(tmp_path)
    assert cfg.reference_node == 7
    assert cfg.baseline == pytest.approx(2.5)
    assert "reference.ini" in cfg.source


def test_ini_skips_bad_lines(tmp_path, capsys):
    _write_ini(tmp_path, "no colon here\ncolour: blue\nbaseline:\nreference_node: 3\n")
    cfg = load_reference_config(tmp_path)
    assert cfg.reference_node == 3
    assert cfg.baseline == pytest.approx(1319167 / 503944)
    out = capsys.readouterr().out
    assert out.count("[WARN]") == 3


def test_env_overrides_ini(tmp_path, monkeypatch):
    _write_ini(tmp_path, "reference_node: 7\nbaseline: 5/2\n")
    monkeypatch.setenv(ENV_REFERENCE_NODE, "11")
    monkeypatch.setenv(ENV_BASELINE, "1.25")
    cfg = load_reference_config(tmp_path)
    assert cfg.reference_node == 11
    assert cfg.baseline == pytest.approx(1.25)


def test_arguments_override_env(monkeypatch):
    monkeypatch.setenv(ENV_REFERENCE_NODE, "11")
    cfg = load_reference_config(reference_node="2", baseline="1")
    assert cfg.reference_node == 2
    assert cfg.baseline == 1.0
    assert cfg.source == "reference_node=argument, baseline=argument"
