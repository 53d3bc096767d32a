# tests/test_predict_script.py - command line smoke checks
import sys

import pytest

import predict


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setattr(predict, "configure_logging", lambda verbose: None)


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["predict.py", *argv])
    return predict.main()


def test_ranked_exits_zero(monkeypatch, corpus_dir):
    assert run(monkeypatch, "thank you for the", "--data-dir", str(corpus_dir), "--seed", "1") == 0


def test_paired_resident_options(monkeypatch, corpus_dir):
    assert run(monkeypatch, "the", "-d", str(corpus_dir), "-m", "resident", "-s", "paired") == 0


def test_invalid_exits_one(monkeypatch, corpus_dir):
    assert run(monkeypatch, "see you in 2020", "--data-dir", str(corpus_dir)) == 1


def test_failure_exits_two(monkeypatch, tmp_path):
    assert run(monkeypatch, "the", "--data-dir", str(tmp_path / "nowhere")) == 2


def test_bad_config_exits_two(monkeypatch, tmp_path):
    assert run(monkeypatch, "the", "--config", str(tmp_path / "missing.json")) == 2
