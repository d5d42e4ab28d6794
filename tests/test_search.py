"""Tests for the fuzzy portfolio search engine."""

import pytest

from portfolio_mcp.content import ContentLoader
from portfolio_mcp.search import FuzzyTuning, Section, rank, search_content
from portfolio_mcp.search.normalize import normalize_text, tokenize
from portfolio_mcp.search.scoring import subsequence_adjacency_score, token_score
from portfolio_mcp.search.snippets import make_snippet


def _project_content(*projects):
    return ContentLoader.from_dict({"full_name": "Test User", "projects": list(projects)})


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_empty_query_returns_no_results(content, query) -> None:
    assert search_content(query, content) == []
    assert rank(query, content) == []


@pytest.mark.parametrize("query", ["(((", "*", "\\", "a+b?", "[x]"])
def test_regex_metacharacters_do_not_raise(content, query) -> None:
    results = search_content(query, content)
    assert isinstance(results, list)


def test_scores_meet_threshold_and_are_ordered(content) -> None:
    ranked = rank("python go engineer", content)
    assert ranked
    assert all(item.score >= 0.3 for item in ranked)
    keys = [(-item.score, item.result.title) for item in ranked]
    assert keys == sorted(keys)


def test_exact_match_ranks_project_first(content) -> None:
    results = search_content("python", content)
    assert results[0].title == "Project: Pipeline Kit"
    assert results[0].section is Section.PROJECTS
    assert results[0].href == "#projects"
    assert results[0].meta == {"tech": "Python, Airflow"}


def test_exact_substring_outranks_subsequence() -> None:
    content = _project_content(
        {"id": "x", "title": "X Service", "technologies": ["Redis"]},
        {"id": "y", "title": "Y Service", "description": "read every data item slowly"},
    )
    ids = [result.id for result in search_content("redis", content)]
    assert ids.index("project-x") < ids.index("project-y")


def test_title_match_outranks_body_only_match() -> None:
    content = _project_content(
        {"id": "b", "title": "Tool", "description": "lineage"},
        {"id": "a", "title": "Lineage", "description": "tool"},
    )
    ranked = rank("lineage", content)
    assert [item.result.id for item in ranked] == ["project-a", "project-b"]
    assert ranked[0].score > ranked[1].score


def test_accent_insensitive_matching(content) -> None:
    assert "skills" in {result.id for result in search_content("cafe", content)}
    assert "about" in {result.id for result in search_content("zoe", content)}


def test_blog_result_links_to_post_url(content) -> None:
    results = search_content("jitter", content)
    blog = next(result for result in results if result.section is Section.BLOG)
    assert blog.id == "blog-retries"
    assert blog.href == "https://blog.example.com/retries"
    assert blog.meta == {"date": "2024-05-01"}


def test_contact_block_skips_empty_channels(content) -> None:
    result = next(r for r in search_content("email", content) if r.id == "contact")
    assert "phone" not in result.snippet


def test_max_results_caps_output(content) -> None:
    assert len(search_content("e", content, FuzzyTuning(max_results=2))) == 2


def test_default_cap_is_24_results() -> None:
    projects = [{"id": f"p{n}", "title": f"Stream {n}", "description": "kafka"} for n in range(30)]
    assert len(search_content("kafka", _project_content(*projects))) == 24


def test_equal_scores_sort_by_title() -> None:
    content = _project_content(
        {"id": "b", "title": "Beta", "description": "kafka"},
        {"id": "a", "title": "Alpha", "description": "kafka"},
    )
    ranked = rank("kafka", content)
    assert [item.result.title for item in ranked] == ["Project: Alpha", "Project: Beta"]
    assert ranked[0].score == ranked[1].score


def test_ids_are_unique_within_response(content) -> None:
    results = search_content("s", content)
    ids = [result.id for result in results]
    assert len(ids) == len(set(ids))


def test_rankings_are_deterministic(content) -> None:
    first = [r.to_dict() for r in search_content("backend python", content)]
    second = [r.to_dict() for r in search_content("backend python", content)]
    assert first == second


def test_default_content_is_searchable() -> None:
    results = search_content("python")
    assert results[0].title == "Project: Local RAG Chatbot"


def test_token_score_tiers() -> None:
    assert token_score("python", "python, go") == 1.0
    assert token_score("pyt", "cpython, go") == 1.0
    assert token_score("rust", "python, go") == 0.0
    assert 0.0 < token_score("pyth", "p-y-t-h") <= 0.8


def test_scattered_token_scores_below_prefix_tier() -> None:
    assert token_score("svc", "a sxvxc") < 0.85


def test_subsequence_rewards_adjacency() -> None:
    spread = subsequence_adjacency_score("abc", "a_b_c")
    tight = subsequence_adjacency_score("abc", "xabcx")
    assert spread < tight <= 1.0
    assert subsequence_adjacency_score("abc", "ab") == 0.0


def test_normalization_and_tokenizing() -> None:
    assert normalize_text("Café Déjà Vu") == "cafe deja vu"
    assert tokenize("  Python   GO ") == ["python", "go"]
    assert tokenize("") == []


def test_snippet_window_and_ellipses() -> None:
    text = "a" * 200 + " needle " + "b" * 200
    snippet = make_snippet(text, ["needle"])
    assert snippet.startswith("...")
    assert snippet.endswith("...")
    assert "needle" in snippet
    assert len(snippet) <= 160 + len("needle") + 6


def test_snippet_falls_back_to_text_start() -> None:
    assert make_snippet("short text", ["zzz"]) == "short text"
    assert make_snippet("x" * 200, ["zz"], window=10) == "xxxxxxxxxx..."
