"""Pydantic models for REST API."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from processarchitec.workflow.document import BusinessContext


class GenerateWorkflowRequest(BaseModel):
    """Generate workflow request."""
    model_config = ConfigDict(populate_by_name=True)

    business_context: Optional[BusinessContext] = Field(default=None, alias="businessContext")
    workflow_description: str = Field(..., alias="workflowDescription", min_length=1)

    def context(self) -> BusinessContext:
        return self.business_context or BusinessContext()


class HealthResponse(BaseModel):
    """Health probe response."""
    model_config = ConfigDict(populate_by_name=True)

    status: str
    version: str
    providers: Dict[str, bool]
    heuristic_fallback: bool = Field(default=True, alias="heuristicFallback")


class ErrorResponse(BaseModel):
    """Error envelope for unexpected failures."""
    error: str
    detail: Optional[Union[str, List[str]]] = None
