from year_parsing.context import ResolveContext
from year_parsing.orchestrators.earliest_year_orchestrator import EarliestYearOrchestrator
from year_parsing.orchestrators.latest_year_orchestrator import LatestYearOrchestrator
from year_parsing.orchestrators.resolve_orchestrator import ResolveOrchestrator
from year_parsing.resolution import YearBound


class ResolveOrchestratorFactory:
    """Factory for creating resolve orchestrators for a year bound."""

    @staticmethod
    def get_orchestrator(bound: YearBound, context: ResolveContext | None = None) -> ResolveOrchestrator:
        """Get the orchestrator for the given bound.

        Args:
            bound: Which end of the date string to resolve
            context: Clock and configuration shared with the extractors

        Returns:
            ResolveOrchestrator: An instance of the corresponding orchestrator.

        Raises:
            ValueError: If the bound is not recognized.
        """
        if bound == YearBound.EARLIEST:
            return EarliestYearOrchestrator(context)
        elif bound == YearBound.LATEST:
            return LatestYearOrchestrator(context)
        else:
            raise ValueError(f"Unknown year bound: {bound}")
