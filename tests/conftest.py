"""
Pytest configuration and fixtures.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from analyzer.schemas import AnalysisRequest
from analyzer.services.llm import ScenarioAnalyzer

TEST_API_KEY = "test-api-key"
TEST_MODEL = "gpt-4o-mini"

VALID_CONTENT = json.dumps({
    "scenarioSummary": "Test summary",
    "potentialPitfalls": ["Pitfall 1"],
    "proposedStrategies": ["Strategy 1"],
    "recommendedResources": ["Resource 1"],
    "disclaimer": "Test disclaimer",
})


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def fake_client():
    """Stub OpenAI client; set chat.completions.create return_value/side_effect per test."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(VALID_CONTENT)
    return client


@pytest.fixture
def analyzer(fake_client):
    """Analyzer wired to the stub client."""
    return ScenarioAnalyzer(api_key=TEST_API_KEY, model=TEST_MODEL, client=fake_client, timeout=5)


@pytest.fixture
def sample_request():
    return AnalysisRequest(scenario="test scenario", constraints=["test constraint"])
