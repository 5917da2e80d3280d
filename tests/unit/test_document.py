"""
Tests for processarchitec.workflow.document and processarchitec.workflow.normalizer.
"""

import pytest

from processarchitec.workflow.document import (
    BusinessContext,
    Node,
    WorkflowDocument,
    default_position,
)
from processarchitec.workflow.normalizer import Normalizer


@pytest.fixture
def normalizer():
    return Normalizer(clock=lambda: 1700000000000)


class TestBusinessContext:

    def test_accepts_camel_case_payload(self):
        context = BusinessContext.model_validate({
            "businessDescription": "Plumbing company",
            "idealCustomer": "Homeowners",
            "somethingElse": "ignored",
        })

        assert context.business_description == "Plumbing company"
        assert context.ideal_customer == "Homeowners"

    def test_missing_fields_display_not_specified(self):
        context = BusinessContext()

        assert context.display("current_tools") == "Not specified"
        assert context.is_empty()

    def test_blank_field_counts_as_missing(self):
        context = BusinessContext(currentTools="   ")

        assert context.display("current_tools") == "Not specified"

    def test_pain_points_fall_back_to_wish_automated(self):
        context = BusinessContext(wishAutomated="Invoice reminders")

        assert context.display("pain_points") == "Invoice reminders"

    def test_numbers_are_coerced_to_text(self):
        context = BusinessContext.model_validate({"repetitiveTime": 12})

        assert context.display("repetitive_time") == "12"

    def test_lists_are_joined(self):
        context = BusinessContext.model_validate({"currentTools": ["Shopify", "Gmail"]})

        assert context.display("current_tools") == "Shopify, Gmail"

    def test_is_immutable(self):
        context = BusinessContext(businessDescription="Bakery")

        with pytest.raises(Exception):
            context.business_description = "Butcher"


class TestWorkflowDocument:

    def test_to_dict_keeps_unknown_keys_and_omits_unset_fields(self):
        doc = WorkflowDocument.model_validate({
            "name": "x",
            "active": True,
            "nodes": [{"id": "a", "typeVersion": 2}],
        })

        data = doc.to_dict()

        assert data == {
            "name": "x",
            "active": True,
            "nodes": [{"id": "a", "typeVersion": 2}],
        }

    def test_default_position(self):
        assert default_position(0) == [250, 300]
        assert default_position(3) == [1000, 300]


class TestNormalizer:

    def test_fills_all_absent_fields(self, normalizer):
        doc = normalizer.normalize(WorkflowDocument())

        assert doc.name == "Generated Workflow - 1700000000000"
        assert doc.settings == {"executionOrder": "v1"}
        assert doc.nodes == []
        assert doc.connections == {}

    def test_blank_name_is_replaced(self, normalizer):
        doc = normalizer.normalize(WorkflowDocument(name="  "))

        assert doc.name.startswith("Generated Workflow - ")

    def test_keeps_existing_values(self, normalizer):
        original = WorkflowDocument.model_validate({
            "name": "Keep me",
            "settings": {"executionOrder": "v0", "timezone": "UTC"},
            "nodes": [{"id": "a", "position": [10, 20]}],
            "connections": {},
        })

        doc = normalizer.normalize(original)

        assert doc.name == "Keep me"
        assert doc.settings == {"executionOrder": "v0", "timezone": "UTC"}
        assert doc.nodes[0].position == [10, 20]

    def test_settings_without_execution_order_get_one(self, normalizer):
        doc = normalizer.normalize(WorkflowDocument(settings={"timezone": "UTC"}))

        assert doc.settings == {"timezone": "UTC", "executionOrder": "v1"}

    def test_positions_default_by_index(self, normalizer):
        doc = WorkflowDocument(nodes=[Node(id="a"), Node(id="b"), Node(id="c")])

        normalized = normalizer.normalize(doc)

        assert [node.position for node in normalized.nodes] == [
            [250, 300],
            [500, 300],
            [750, 300],
        ]

    def test_only_missing_positions_are_filled(self, normalizer):
        doc = WorkflowDocument(nodes=[Node(id="a", position=[0, 0]), Node(id="b")])

        normalized = normalizer.normalize(doc)

        assert normalized.nodes[0].position == [0, 0]
        assert normalized.nodes[1].position == [500, 300]

    def test_does_not_mutate_input(self, normalizer):
        doc = WorkflowDocument(nodes=[Node(id="a")])

        normalizer.normalize(doc)

        assert doc.nodes[0].position is None
        assert doc.name is None

    def test_is_idempotent(self):
        normalizer = Normalizer()
        doc = WorkflowDocument.model_validate({
            "nodes": [{"id": "a"}, {"id": "b", "position": [1, 2]}],
            "settings": {"saveManualExecutions": True},
        })

        once = normalizer.normalize(doc)
        twice = normalizer.normalize(once)

        assert twice.to_dict() == once.to_dict()

    def test_dangling_connections_are_left_alone(self, normalizer):
        doc = WorkflowDocument.model_validate({
            "nodes": [{"id": "a"}],
            "connections": {"a": {"main": [[{"node": "missing", "type": "main", "index": 0}]]}},
        })

        normalized = normalizer.normalize(doc)

        assert normalized.to_dict()["connections"] == {
            "a": {"main": [[{"node": "missing", "type": "main", "index": 0}]]}
        }
