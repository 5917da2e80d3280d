"""Keyword-driven workflow synthesis used when no AI output is usable."""

from typing import List

from processarchitec.workflow.document import (
    Connections,
    Edge,
    Node,
    WorkflowDocument,
    default_position,
    default_settings,
)

NAME_MAX_LENGTH = 60
DEFAULT_NAME = "Basic Automation Workflow"

PROCESS_CODE = (
    "return $input.all().map(item => ({\n"
    "  json: {\n"
    "    ...item.json,\n"
    "    processed: true,\n"
    "    processedAt: new Date().toISOString()\n"
    "  }\n"
    "}));"
)


class HeuristicSynthesizer:
    """Builds a linear trigger -> process -> (sheets) workflow from keywords.

    Deterministic: the same requirement always yields the same document, and
    no input makes it fail.
    """

    def synthesize(self, requirement: str) -> WorkflowDocument:
        text = (requirement or "").lower()

        nodes = [self._trigger_node(text), self._process_node()]
        if "sheet" in text:
            nodes.append(self._sheets_node())

        for index, node in enumerate(nodes):
            node.position = default_position(index)

        return WorkflowDocument(
            name=self._name(requirement),
            nodes=nodes,
            connections=self._chain(nodes),
            settings=default_settings(),
        )

    def _trigger_node(self, text: str) -> Node:
        if "email" in text:
            return Node(
                id="trigger",
                name="Email Trigger",
                type="n8n-nodes-base.emailReadImap",
                parameters={
                    "mailbox": "INBOX",
                    "postProcessAction": "read",
                    "options": {},
                },
            )
        if "daily" in text or "schedule" in text:
            return Node(
                id="trigger",
                name="Schedule Trigger",
                type="n8n-nodes-base.scheduleTrigger",
                parameters={
                    "rule": {"interval": [{"field": "hours", "hoursInterval": 24}]},
                },
            )
        return Node(
            id="trigger",
            name="Webhook Trigger",
            type="n8n-nodes-base.webhook",
            parameters={
                "path": "workflow-webhook",
                "httpMethod": "POST",
                "responseMode": "onReceived",
                "responseData": "allEntries",
            },
        )

    def _process_node(self) -> Node:
        return Node(
            id="process",
            name="Process Data",
            type="n8n-nodes-base.code",
            parameters={"jsCode": PROCESS_CODE},
        )

    def _sheets_node(self) -> Node:
        return Node(
            id="sheets",
            name="Append to Spreadsheet",
            type="n8n-nodes-base.googleSheets",
            parameters={
                "operation": "append",
                "documentId": "",
                "sheetName": "Sheet1",
                "columns": {"mappingMode": "autoMapInputData"},
            },
        )

    def _chain(self, nodes: List[Node]) -> Connections:
        connections: Connections = {}
        for source, target in zip(nodes, nodes[1:]):
            connections[source.id] = {
                "main": [[Edge(node=target.id).model_dump()]],
            }
        return connections

    def _name(self, requirement: str) -> str:
        lines = (requirement or "").strip().splitlines()
        summary = " ".join(lines[0].split()) if lines else ""
        if not summary:
            return DEFAULT_NAME
        if len(summary) > NAME_MAX_LENGTH:
            summary = summary[:NAME_MAX_LENGTH - 3].rstrip() + "..."
        return f"Workflow - {summary}"


def synthesize(requirement: str) -> WorkflowDocument:
    return HeuristicSynthesizer().synthesize(requirement)
