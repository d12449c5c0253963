"""Tests for the command-line entry points."""

import pytest

from embedcheck.scripts import query_similarity, setup_check


class FakeHuggingFaceClient:
    def __init__(self, settings):
        self.settings = settings
        self.requests = []

    async def get_similarities_for_texts(self, texts):
        self.requests.append(texts)
        return [0.5] * (len(texts) - 1)


def test_similarity_script_runs_example_sets(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(query_similarity, "HuggingFaceClient", FakeHuggingFaceClient)

    code = query_similarity.main(["--env-file", str(tmp_path / "none.env")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Test Set 1: Original Examples" in out
    assert "Test Set 2: Machine Learning Related Sentences" in out
    assert out.count("Compared to:") == 5
    assert out.index('Compared to: "Machine learning is fascinating"') < out.index(
        'Compared to: "PGVector is a great extension for PostgreSQL"'
    )


def test_similarity_script_custom_query(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(query_similarity, "HuggingFaceClient", FakeHuggingFaceClient)

    code = query_similarity.main([
        "--env-file", str(tmp_path / "none.env"),
        "--query", "What is ML?",
        "--compare", "ML is AI",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert 'Query: "What is ML?"' in out
    assert "Similarity: 50.00%" in out
    assert out.count("Compared to:") == 1


def test_similarity_script_compare_requires_query():
    with pytest.raises(SystemExit):
        query_similarity.parse_args(["--compare", "x"])


def test_setup_script_write_failure_exits_1(tmp_path):
    code = setup_check.main(["--env-file", str(tmp_path / "missing" / ".env")])
    assert code == 1


def test_setup_script_returns_probe_outcome(tmp_path, monkeypatch):
    async def fake_run_setup(self, env_path, cleanup, write_template):
        return {"success": cleanup}

    monkeypatch.setattr(setup_check.SetupOrchestrator, "run_setup", fake_run_setup)

    assert setup_check.main(["--env-file", str(tmp_path / ".env")]) == 1
    assert setup_check.main(["--env-file", str(tmp_path / ".env"), "--cleanup"]) == 0
