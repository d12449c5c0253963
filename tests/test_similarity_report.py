"""Tests for the similarity report formatter and query service."""

import asyncio

import httpx
import pytest

from embedcheck.services.similarity_service import format_similarity_report, query_similarity, to_fixed

QUERY = "Hello world"
COMPARE = ["Machine learning is fascinating", "PGVector is a great extension for PostgreSQL"]


def test_report_pairs_in_input_order():
    """Each compared text gets one pair, in order, with two-decimal percentages."""
    report = format_similarity_report(QUERY, COMPARE, [0.123456, 0.5])

    assert report.count("Compared to:") == 2
    assert report.count("Similarity:") == 2
    assert report.index(COMPARE[0]) < report.index(COMPARE[1])
    assert 'Compared to: "Machine learning is fascinating"\nSimilarity: 12.35%' in report
    assert 'Compared to: "PGVector is a great extension for PostgreSQL"\nSimilarity: 50.00%' in report


def test_report_layout():
    report = format_similarity_report(QUERY, ["a"], [1.0])
    assert report == '\n=== Similarity Results ===\nQuery: "Hello world"\n\nCompared to: "a"\nSimilarity: 100.00%\n'


@pytest.mark.parametrize("score, expected", [
    (0.00125, "0.13"),
    (0.12125, "12.13"),
    (-0.00125, "-0.13"),
])
def test_report_rounds_ties_away_from_zero(score, expected):
    """Exact ties round up like JavaScript's toFixed, not to the even digit."""
    report = format_similarity_report(QUERY, ["a"], [score])
    assert f"Similarity: {expected}%" in report


def test_to_fixed_negative_zero():
    assert to_fixed(-0.0) == "0.00"
    assert to_fixed(12.125) == "12.13"
    assert to_fixed(1.005) == "1.00"


def test_report_negative_score():
    report = format_similarity_report(QUERY, ["a"], [-0.25])
    assert "Similarity: -25.00%" in report


def test_report_is_idempotent():
    scores = [0.1, 0.2]
    assert format_similarity_report(QUERY, COMPARE, scores) == format_similarity_report(QUERY, COMPARE, scores)


def test_report_pair_count_matches_compare_count():
    texts = [f"sentence {i}" for i in range(5)]
    report = format_similarity_report(QUERY, texts, [0.1] * 5)
    assert report.count("Compared to:") == len(texts)


def test_report_no_comparisons():
    report = format_similarity_report(QUERY, [], [])
    assert "Compared to:" not in report
    assert 'Query: "Hello world"' in report


def test_report_missing_score_raises():
    """Fewer scores than texts is an index error, not silently truncated."""
    with pytest.raises(IndexError):
        format_similarity_report(QUERY, COMPARE, [0.5])


def test_report_extra_scores_ignored():
    report = format_similarity_report(QUERY, ["a"], [0.5, 0.9])
    assert report.count("Compared to:") == 1


def test_query_similarity_prints_report(settings, capsys, make_hf_client):
    sent = []

    def handler(request):
        sent.append(request)
        return httpx.Response(200, json=[0.8, 0.1])

    client = make_hf_client(settings, handler)
    scores = asyncio.run(query_similarity(client, QUERY, COMPARE))

    assert scores == [0.8, 0.1]
    out = capsys.readouterr().out
    assert "=== Similarity Results ===" in out
    assert "Similarity: 80.00%" in out
    assert "Similarity: 10.00%" in out
    assert len(sent) == 1


def test_query_similarity_failure_returns_none(settings, capsys, make_hf_client):
    def handler(request):
        return httpx.Response(503, json={"error": "Model is loading"})

    client = make_hf_client(settings, handler)
    assert asyncio.run(query_similarity(client, QUERY, COMPARE)) is None
    assert "Similarity Results" not in capsys.readouterr().out
