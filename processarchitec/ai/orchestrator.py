"""Provider fallback chain for workflow generation."""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import structlog

from processarchitec.ai.errors import GenerationError, ParseError
from processarchitec.ai.extractor import ResponseExtractor
from processarchitec.ai.heuristic import HeuristicSynthesizer
from processarchitec.ai.prompts.workflow import PromptBuilder
from processarchitec.ai.providers.base import ProviderClient
from processarchitec.workflow.document import BusinessContext, WorkflowDocument
from processarchitec.workflow.normalizer import Normalizer

logger = structlog.get_logger(__name__)

HEURISTIC_SOURCE = "heuristic"


@dataclass
class ProviderAttempt:
    """Outcome of one provider call."""
    provider: str
    succeeded: bool
    error_type: Optional[str] = None
    error: Optional[str] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "succeeded": self.succeeded,
            "error_type": self.error_type,
            "error": self.error,
            "duration": round(self.duration, 4),
        }


@dataclass
class GenerationReport:
    """Which provider (or the heuristic path) produced a document."""
    source: str = HEURISTIC_SOURCE
    attempts: List[ProviderAttempt] = field(default_factory=list)
    duration: float = 0.0

    @property
    def attempted(self) -> List[str]:
        return [attempt.provider for attempt in self.attempts]

    @property
    def used_fallback(self) -> bool:
        return self.source == HEURISTIC_SOURCE


@dataclass
class GenerationResult:
    document: WorkflowDocument
    report: GenerationReport


class FallbackOrchestrator:
    """Tries each provider in order and falls back to heuristic synthesis.

    Providers are called one at a time; a later provider only runs once the
    previous one has failed. Cancellation is never swallowed, so an aborted
    request stops the chain where it is.
    """

    def __init__(
        self,
        providers: Optional[Sequence[ProviderClient]] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        extractor: Optional[ResponseExtractor] = None,
        synthesizer: Optional[HeuristicSynthesizer] = None,
        normalizer: Optional[Normalizer] = None,
    ):
        self.providers = list(providers or [])
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.extractor = extractor or ResponseExtractor()
        self.synthesizer = synthesizer or HeuristicSynthesizer()
        self.normalizer = normalizer or Normalizer()

    async def generate(self, context: BusinessContext, requirement: str) -> WorkflowDocument:
        result = await self.run(context, requirement)
        return result.document

    async def run(self, context: BusinessContext, requirement: str) -> GenerationResult:
        started = time.monotonic()
        report = GenerationReport()
        prompt = self.prompt_builder.build(context, requirement)

        document = None
        for provider in self.providers:
            document = await self._attempt(provider, prompt, report)
            if document is not None:
                report.source = provider.name
                break

        if document is None:
            document = self.synthesizer.synthesize(requirement)
            report.source = HEURISTIC_SOURCE

        document = self.normalizer.normalize(document)
        report.duration = time.monotonic() - started

        logger.info(
            "workflow_generated",
            source=report.source,
            workflow=document.name,
            nodes=len(document.nodes),
            attempts=[attempt.to_dict() for attempt in report.attempts],
            duration=round(report.duration, 4),
        )
        return GenerationResult(document=document, report=report)

    async def _attempt(
        self,
        provider: ProviderClient,
        prompt: str,
        report: GenerationReport,
    ) -> Optional[WorkflowDocument]:
        started = time.monotonic()
        try:
            raw_text = await provider.generate(prompt)
            document = self.extractor.extract(raw_text)
            if not document.nodes:
                raise ParseError("workflow has no nodes")
        except GenerationError as e:
            duration = time.monotonic() - started
            report.attempts.append(ProviderAttempt(
                provider=provider.name,
                succeeded=False,
                error_type=type(e).__name__,
                error=str(e),
                duration=duration,
            ))
            logger.warning(
                "provider_attempt_failed",
                provider=provider.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None

        report.attempts.append(ProviderAttempt(
            provider=provider.name,
            succeeded=True,
            duration=time.monotonic() - started,
        ))
        return document
