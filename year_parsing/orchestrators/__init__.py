"""Rule cascade orchestrators for earliest and latest year resolution."""

from year_parsing.orchestrators.resolve_orchestrator import ResolveOrchestrator
from year_parsing.orchestrators.earliest_year_orchestrator import EarliestYearOrchestrator
from year_parsing.orchestrators.latest_year_orchestrator import LatestYearOrchestrator
from year_parsing.orchestrators.resolve_orchestrator_factory import ResolveOrchestratorFactory

__all__ = [
    "ResolveOrchestrator",
    "EarliestYearOrchestrator",
    "LatestYearOrchestrator",
    "ResolveOrchestratorFactory",
]
