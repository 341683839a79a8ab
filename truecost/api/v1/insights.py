"""GET /v1/insights/context - scenario summary for the AI insights service"""

from fastapi import APIRouter, Depends

from truecost.api.dependencies import get_scenario_repository
from truecost.api.v1.schemas import InsightsContextResponse
from truecost.config import settings
from truecost.domain.scenarios import summarize_scenarios
from truecost.infrastructure.database.repositories import ScenarioRepository, to_domain

router = APIRouter()


@router.get("/insights/context", response_model=InsightsContextResponse)
def insights_context(repo: ScenarioRepository = Depends(get_scenario_repository)):
    """
    Summarize the newest saved scenarios as one line of text.

    The AI service only sees this summary, never the computed stats.
    """
    records = repo.list_scenarios(limit=settings.max_summary_scenarios)
    scenarios = [to_domain(r) for r in records]

    return InsightsContextResponse(
        summary=summarize_scenarios(scenarios, limit=settings.max_summary_scenarios),
        scenario_count=len(scenarios),
    )
