"""Workflow document and business context models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_EXECUTION_ORDER = "v1"
NOT_SPECIFIED = "Not specified"

# Canvas layout used whenever a node has no position of its own.
POSITION_ORIGIN_X = 250
POSITION_STEP_X = 250
POSITION_Y = 300


def default_position(index: int) -> List[int]:
    """Position of the node at ``index`` on a left-to-right canvas."""
    return [POSITION_ORIGIN_X + POSITION_STEP_X * index, POSITION_Y]


def default_settings() -> Dict[str, Any]:
    return {"executionOrder": DEFAULT_EXECUTION_ORDER}


class Edge(BaseModel):
    """A single connection from an output port to a target node input."""
    model_config = ConfigDict(extra="allow")

    node: str
    type: str = "main"
    index: int = 0


# source node id -> port type -> output fan-outs -> edges; stored as given.
Connections = Dict[str, Any]


class Node(BaseModel):
    """A workflow node.

    ``type`` comes from the target runtime's open-ended node catalog and is
    never checked here; providers may even leave it out. Field values are
    kept as the provider wrote them (numeric ids, null parameters).
    """
    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    type: Any = None
    position: Any = None
    parameters: Optional[Dict[str, Any]] = Field(default_factory=dict)


class WorkflowDocument(BaseModel):
    """Importable workflow definition.

    Every field is optional at parse time; ``Normalizer`` fills the gaps
    before a document leaves the pipeline. Unknown top-level keys returned by
    a provider (``active``, ``meta``, ...) are kept as-is.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    nodes: Optional[List[Node]] = None
    connections: Optional[Connections] = None
    settings: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict containing only provided or filled-in fields."""
        return self.model_dump(mode="json", exclude_unset=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(exclude_unset=True, indent=indent)


class BusinessContext(BaseModel):
    """Free-text description of the business asking for an automation."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    business_description: Optional[str] = Field(default=None, alias="businessDescription")
    unique_value: Optional[str] = Field(default=None, alias="uniqueValue")
    revenue_model: Optional[str] = Field(default=None, alias="revenueModel")
    ideal_customer: Optional[str] = Field(default=None, alias="idealCustomer")
    current_tools: Optional[str] = Field(default=None, alias="currentTools")
    disconnected_tools: Optional[str] = Field(default=None, alias="disconnectedTools")
    pain_points: Optional[str] = Field(default=None, alias="painPoints")
    wish_automated: Optional[str] = Field(default=None, alias="wishAutomated")
    repetitive_time: Optional[str] = Field(default=None, alias="repetitiveTime")
    error_points: Optional[str] = Field(default=None, alias="errorPoints")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Optional[str]:
        """Lists are joined with commas; other scalars are stringified."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value if item is not None)
        return str(value)

    def display(self, field_name: str) -> str:
        """Value of ``field_name`` for prompt interpolation."""
        value = getattr(self, field_name)
        if field_name == "pain_points" and not _present(value):
            value = self.wish_automated
        return value.strip() if _present(value) else NOT_SPECIFIED

    def is_empty(self) -> bool:
        return not any(_present(value) for value in self.model_dump().values())


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(str(value).strip())
