"""Prompts for AI workflow generation."""

from processarchitec.workflow.document import BusinessContext


WORKFLOW_SYSTEM_PROMPT = (
    "You are an n8n workflow expert. Return only valid JSON, "
    "no explanations or markdown."
)

WORKFLOW_GENERATION_PROMPT = """You are an expert n8n workflow automation specialist. Create a production-ready n8n workflow based on the following requirements.

Return ONLY a single JSON object. Do not add explanations, prose or markdown code fences.
The object must contain exactly these keys: "name", "nodes", "connections", "settings".

Business Context:
- Business: {business_description}
- Unique Value: {unique_value}
- Revenue Model: {revenue_model}
- Ideal Customer: {ideal_customer}
- Current Tools: {current_tools}
- Disconnected Tools: {disconnected_tools}
- Pain Points: {pain_points}
- Repetitive Tasks: {repetitive_time} spent on manual tasks
- Error Points: {error_points}

Workflow Requirement:
{requirement}

Generate a complete n8n workflow that includes:
1. An appropriate trigger node for how the workflow starts
2. Processing nodes for the business logic
3. Integration nodes for every tool mentioned in the requirement
4. Error handling nodes where appropriate
5. Valid connections between nodes, keyed by source node id, in the form
   {{"<source id>": {{"main": [[{{"node": "<target id>", "type": "main", "index": 0}}]]}}}}

Every node needs a unique "id", a "name", a "type", a "position" ([x, y]) and "parameters".
Set "settings" to {{"executionOrder": "v1"}}.
The JSON must be valid and importable directly into n8n."""

_CONTEXT_FIELDS = (
    "business_description",
    "unique_value",
    "revenue_model",
    "ideal_customer",
    "current_tools",
    "disconnected_tools",
    "pain_points",
    "repetitive_time",
    "error_points",
)


class PromptBuilder:
    """Builds the single user prompt sent to every provider."""

    template = WORKFLOW_GENERATION_PROMPT
    system_prompt = WORKFLOW_SYSTEM_PROMPT

    def build(self, context: BusinessContext, requirement: str) -> str:
        values = {field: context.display(field) for field in _CONTEXT_FIELDS}
        return self.template.format(requirement=requirement, **values)
