"""
Tests for processarchitec.ai.prompts.workflow.
"""

from processarchitec.ai.prompts.workflow import PromptBuilder, WORKFLOW_SYSTEM_PROMPT
from processarchitec.workflow.document import BusinessContext


def test_prompt_embeds_context_and_requirement(business_context):
    prompt = PromptBuilder().build(business_context, "Log every Shopify order to a sheet")

    assert "Business: Online bakery selling custom cakes" in prompt
    assert "Current Tools: Shopify, Google Sheets, Gmail" in prompt
    assert "Pain Points: Orders are copied into a spreadsheet by hand" in prompt
    assert "Repetitive Tasks: 10 hours a week spent on manual tasks" in prompt
    assert "Log every Shopify order to a sheet" in prompt


def test_missing_fields_render_not_specified(business_context):
    prompt = PromptBuilder().build(business_context, "anything")

    assert "Revenue Model: Not specified" in prompt
    assert "Error Points: Not specified" in prompt


def test_empty_context():
    prompt = PromptBuilder().build(BusinessContext(), "Send a daily report")

    assert "Business: Not specified" in prompt
    assert prompt.count("Not specified") == 9


def test_prompt_demands_bare_json_with_required_keys():
    prompt = PromptBuilder().build(BusinessContext(), "x")

    assert "Return ONLY a single JSON object" in prompt
    assert "markdown" in prompt
    for key in ('"name"', '"nodes"', '"connections"', '"settings"'):
        assert key in prompt


def test_prompt_contains_structural_checklist():
    prompt = PromptBuilder().build(BusinessContext(), "x")

    assert "trigger node" in prompt
    assert "Processing nodes" in prompt
    assert "Integration nodes" in prompt
    assert "Error handling" in prompt
    assert "connections between nodes" in prompt


def test_requirement_with_braces_is_kept_verbatim():
    requirement = 'Post {"text": "{{ $json.title }}"} to Slack'

    prompt = PromptBuilder().build(BusinessContext(), requirement)

    assert requirement in prompt


def test_build_is_pure(business_context):
    builder = PromptBuilder()

    assert builder.build(business_context, "a") == builder.build(business_context, "a")


def test_system_prompt_forbids_prose():
    assert "only valid JSON" in WORKFLOW_SYSTEM_PROMPT
