"""/v1/scenarios - saved loan scenarios, their stats and head-to-head comparison"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from truecost.api.dependencies import get_request_id, get_scenario_repository
from truecost.api.v1.schemas import (
    ComparisonResponse,
    ComparisonSide,
    LoanResultSchema,
    ScenarioCreateRequest,
    ScenarioListResponse,
    ScenarioResponse,
)
from truecost.domain.exceptions import InvalidScenarioIdError, ScenarioNotFoundError
from truecost.domain.loans import normalize_frequency
from truecost.domain.scenarios import compare_scenarios, normalize_rate_input, scenario_stats
from truecost.infrastructure.database.repositories import ScenarioRepository, to_domain
from truecost.infrastructure.observability.metrics import record_scenario

router = APIRouter()


def _scenario_response(record) -> ScenarioResponse:
    scenario = to_domain(record)
    return ScenarioResponse.from_domain(scenario, scenario_stats(scenario))


def _load(repo: ScenarioRepository, scenario_id: str):
    """Fetch a scenario, translating domain errors to HTTP errors"""
    try:
        return repo.get_scenario(scenario_id)
    except InvalidScenarioIdError:
        raise HTTPException(status_code=400, detail="Invalid scenario ID format")
    except ScenarioNotFoundError:
        raise HTTPException(status_code=404, detail="Scenario not found")


@router.post("/scenarios", response_model=ScenarioResponse, status_code=201)
def create_scenario(
    request_body: ScenarioCreateRequest,
    request_id: str = Depends(get_request_id),
    repo: ScenarioRepository = Depends(get_scenario_repository),
):
    """
    Save a loan scenario.

    The rate may be typed as a decimal or a percent. It is stored as the
    fixed annual rate for FIXED scenarios and as the spread over the policy
    rate otherwise.
    """
    rate = normalize_rate_input(request_body.rate)
    is_fixed = request_body.rate_source == "FIXED"

    try:
        record = repo.create_scenario(
            name=request_body.name,
            principal=request_body.principal,
            term_months=request_body.term_months,
            payment_frequency=normalize_frequency(request_body.payment_frequency).value,
            rate_source=request_body.rate_source,
            fixed_annual_rate=rate if is_fixed else None,
            spread_over_policy_rate=None if is_fixed else rate,
            currency=request_body.currency,
            extra_payment_per_period=request_body.extra_payment_per_period,
        )
        repo.db.commit()
    except Exception as e:
        repo.db.rollback()
        logging.error(f"Failed to save scenario: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_scenario("created")
    logging.info(
        "Scenario saved",
        extra={"request_id": request_id, "step": "scenario_created", "scenario_id": str(record.id)},
    )
    return _scenario_response(record)


@router.get("/scenarios", response_model=ScenarioListResponse)
def list_scenarios(repo: ScenarioRepository = Depends(get_scenario_repository)):
    """All saved scenarios, newest first, each with its stats"""
    return ScenarioListResponse(scenarios=[_scenario_response(r) for r in repo.list_scenarios()])


@router.get("/scenarios/compare", response_model=ComparisonResponse)
def compare(
    a: str = Query(..., description="First scenario ID"),
    b: str = Query(..., description="Second scenario ID"),
    repo: ScenarioRepository = Depends(get_scenario_repository),
):
    """Head-to-head stats for two saved scenarios"""
    comparison = compare_scenarios(to_domain(_load(repo, a)), to_domain(_load(repo, b)))
    record_scenario("compared")

    return ComparisonResponse(
        first=ComparisonSide(
            scenario_id=comparison.first.id,
            name=comparison.first.name,
            payment_label=comparison.first_payment_label,
            stats=LoanResultSchema.from_domain(comparison.first_stats),
        ),
        second=ComparisonSide(
            scenario_id=comparison.second.id,
            name=comparison.second.name,
            payment_label=comparison.second_payment_label,
            stats=LoanResultSchema.from_domain(comparison.second_stats),
        ),
        interest_difference=comparison.interest_difference,
        cheaper_id=comparison.cheaper_id,
    )


@router.get("/scenarios/{scenario_id}", response_model=ScenarioResponse)
def get_scenario(scenario_id: str, repo: ScenarioRepository = Depends(get_scenario_repository)):
    return _scenario_response(_load(repo, scenario_id))


@router.delete("/scenarios/{scenario_id}", status_code=204)
def delete_scenario(
    scenario_id: str,
    request_id: str = Depends(get_request_id),
    repo: ScenarioRepository = Depends(get_scenario_repository),
):
    try:
        repo.delete_scenario(scenario_id)
    except InvalidScenarioIdError:
        raise HTTPException(status_code=400, detail="Invalid scenario ID format")
    except ScenarioNotFoundError:
        raise HTTPException(status_code=404, detail="Scenario not found")
    repo.db.commit()

    record_scenario("deleted")
    logging.info(
        "Scenario deleted",
        extra={"request_id": request_id, "step": "scenario_deleted", "scenario_id": scenario_id},
    )
    return Response(status_code=204)
