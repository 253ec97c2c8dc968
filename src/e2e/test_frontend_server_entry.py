import importlib
from pathlib import Path
import pytest
from flask import Flask
import frontend.web as webmod
import shakesearch.config as CFG

def _seed(tmp: Path) -> list[str]:
    corpus = tmp / "works.txt"
    corpus.write_text("Friends, Romans, countrymen, lend me your ears;\n", encoding="utf-8")
    quotes = tmp / "quotes.csv"
    quotes.write_text('1,Julius Caesar,3.2.73,ANTONY,"Friends, Romans, countrymen, lend me your ears;"\n',
                      encoding="utf-8")
    return ["--corpus", str(corpus), "--quotes", str(quotes)]

@pytest.fixture
def runs(monkeypatch):
    calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kw: calls.append(kw))
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setattr(CFG, "VERBOSE", False)
    return calls

@pytest.mark.e2e
def test_web_main_load_error_exits_nonzero(tmp_path: Path, runs):
    rc = webmod.main(["--corpus", str(tmp_path / "missing.txt"), "--quotes", str(tmp_path / "missing.csv")])
    assert rc == 1
    assert runs == []

@pytest.mark.e2e
def test_web_main_rejects_wrong_source_types(tmp_path: Path, runs):
    args = _seed(tmp_path)
    rc = webmod.main(["--corpus", args[3], "--quotes", args[3]])
    assert rc == 1
    assert runs == []

@pytest.mark.e2e
def test_verbose_does_not_enable_debugger(tmp_path: Path, runs):
    assert webmod.main(_seed(tmp_path) + ["--verbose"]) == 0
    (kw,) = runs
    assert kw["debug"] is False
    assert kw["host"] == CFG.DEFAULT_HOST
    assert kw["port"] == 3001

@pytest.mark.e2e
def test_debug_flag_and_port_from_environment(tmp_path: Path, runs, monkeypatch):
    monkeypatch.setenv("PORT", "4321")
    assert webmod.main(_seed(tmp_path) + ["--debug"]) == 0
    (kw,) = runs
    assert kw["debug"] is True
    assert kw["port"] == 4321

@pytest.mark.e2e
def test_bad_port_is_a_usage_error(tmp_path: Path, runs, monkeypatch, capsys):
    monkeypatch.setenv("PORT", "abc")
    with pytest.raises(SystemExit) as ei:
        webmod.main(_seed(tmp_path))
    assert ei.value.code == 2
    assert "--port" in capsys.readouterr().err
    assert runs == []

@pytest.mark.e2e
def test_bad_port_does_not_break_import(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    importlib.reload(CFG)
    assert CFG.DEFAULT_PORT == 3001
