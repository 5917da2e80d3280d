"""
Pytest configuration and fixtures for the processarchitec project.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from processarchitec.ai.errors import ProviderError
from processarchitec.ai.providers.base import GenerationOptions
from processarchitec.config import Settings
from processarchitec.workflow.document import BusinessContext


VALID_WORKFLOW_JSON = (
    '{"name": "Lead Router", '
    '"nodes": [{"id": "hook", "name": "Webhook", "type": "n8n-nodes-base.webhook", '
    '"position": [250, 300], "parameters": {"path": "leads"}}, '
    '{"id": "crm", "name": "Create Contact", "type": "n8n-nodes-base.hubspot", '
    '"parameters": {}}], '
    '"connections": {"hook": {"main": [[{"node": "crm", "type": "main", "index": 0}]]}}, '
    '"settings": {"executionOrder": "v1"}}'
)


class StubProvider:
    """In-memory provider returning canned text or raising a canned error."""

    def __init__(self, name, response=None, error=None, calls=None):
        self.name = name
        self.response = response
        self.error = error
        self.calls = calls if calls is not None else []
        self.options = GenerationOptions(model=f"{name}-model")
        self.closed = False

    async def generate(self, prompt, options=None):
        self.calls.append(self.name)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def calls():
    """Shared call log, in invocation order, across stub providers."""
    return []


@pytest.fixture
def failing_provider(calls):
    return StubProvider(
        "anthropic",
        error=ProviderError("anthropic", ProviderError.STATUS, "overloaded", status_code=529),
        calls=calls,
    )


@pytest.fixture
def working_provider(calls):
    return StubProvider("openai", response=VALID_WORKFLOW_JSON, calls=calls)


@pytest.fixture
def business_context():
    return BusinessContext(
        businessDescription="Online bakery selling custom cakes",
        currentTools="Shopify, Google Sheets, Gmail",
        painPoints="Orders are copied into a spreadsheet by hand",
        repetitiveTime="10 hours a week",
    )


@pytest.fixture
def offline_settings():
    """Settings with every provider credential unset."""
    return Settings(
        _env_file=None,
        anthropic_api_key=None,
        openai_api_key=None,
        openrouter_api_key=None,
    )
