"""Shared fixtures for portfolio-mcp tests."""

import copy

import pytest

from portfolio_mcp.content import ContentLoader, PortfolioContent
from portfolio_mcp.shell import RecordingEnvironment, ShellInterpreter


SAMPLE_CONTENT = {
    "full_name": "Zoë Example",
    "education": "State University — B.Sc. Computer Science",
    "summary": "Backend engineer building data pipelines and APIs in Python and Go.",
    "skills": {
        "core_stack": ["Python", "Go", "SQL"],
        "domains": ["Data Engineering", "Distributed Systems"],
        "interests": ["Observability", "Café culture"],
    },
    "projects": [
        {
            "id": "pipeline-kit",
            "title": "Pipeline Kit",
            "description": "Composable batch pipelines with retries and lineage tracking.",
            "technologies": ["Python", "Airflow"],
            "links": [{"label": "GitHub", "href": "https://github.com/zoe/pipeline-kit"}],
        },
        {
            "id": "edge-cache",
            "title": "Edge Cache",
            "description": "Read-through cache service for slow upstream APIs.",
            "technologies": ["Go", "Redis"],
        },
    ],
    "experience": [
        {
            "company": "Acme Corp",
            "role": "Software Engineer",
            "period": "2022 - Present",
            "summary": "Owns ingestion services and on-call tooling.",
        }
    ],
    "learning": ["Rust ownership model"],
    "contributions": ["Fixed retry jitter in an open-source HTTP client."],
    "blog": [
        {
            "id": "retries",
            "title": "Retries Done Right",
            "excerpt": "Backoff, jitter and idempotency keys.",
            "date": "2024-05-01",
            "url": "https://blog.example.com/retries",
        }
    ],
    "contact": {"email": "zoe@example.com", "phone": None},
    "links": [{"label": "GitHub", "href": "https://github.com/zoe"}],
}


@pytest.fixture()
def raw_content() -> dict:
    return copy.deepcopy(SAMPLE_CONTENT)


@pytest.fixture()
def content() -> PortfolioContent:
    return ContentLoader.from_dict(SAMPLE_CONTENT)


@pytest.fixture()
def environment() -> RecordingEnvironment:
    return RecordingEnvironment()


@pytest.fixture()
def shell(content: PortfolioContent, environment: RecordingEnvironment) -> ShellInterpreter:
    return ShellInterpreter(content=content, environment=environment)
