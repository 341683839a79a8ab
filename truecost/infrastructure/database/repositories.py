"""Data access layer for saved loan scenarios"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from truecost.infrastructure.database.models import LoanScenarioRecord
from truecost.domain.exceptions import InvalidScenarioIdError, ScenarioNotFoundError
from truecost.domain.models import LoanScenario


def parse_scenario_id(scenario_id: str) -> uuid.UUID:
    """Raises InvalidScenarioIdError for anything that is not a UUID"""
    try:
        return uuid.UUID(scenario_id)
    except ValueError as e:
        raise InvalidScenarioIdError(f"Invalid scenario ID format: {scenario_id}") from e


def to_domain(record: LoanScenarioRecord) -> LoanScenario:
    """Map an ORM row onto the pure domain record"""
    return LoanScenario(
        id=str(record.id),
        name=record.name,
        principal=record.principal,
        term_months=record.term_months,
        payment_frequency=record.payment_frequency,
        rate_source=record.rate_source,
        fixed_annual_rate=record.fixed_annual_rate,
        spread_over_policy_rate=record.spread_over_policy_rate,
        currency=record.currency,
        extra_payment_per_period=record.extra_payment_per_period,
        created_at=record.created_at,
    )


class ScenarioRepository:
    """Repository for loan scenarios"""

    def __init__(self, db: Session):
        self.db = db

    def create_scenario(
        self,
        name: str,
        principal: float,
        term_months: int,
        payment_frequency: str,
        rate_source: str,
        fixed_annual_rate: Optional[float] = None,
        spread_over_policy_rate: Optional[float] = None,
        currency: str = "CAD",
        extra_payment_per_period: Optional[float] = None,
    ) -> LoanScenarioRecord:
        """Persist a scenario (caller commits)"""
        record = LoanScenarioRecord(
            name=name,
            principal=principal,
            term_months=term_months,
            payment_frequency=payment_frequency,
            rate_source=rate_source,
            fixed_annual_rate=fixed_annual_rate,
            spread_over_policy_rate=spread_over_policy_rate,
            currency=currency,
            extra_payment_per_period=extra_payment_per_period,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        return record

    def get_scenario(self, scenario_id: str) -> LoanScenarioRecord:
        """
        Fetch a single scenario.

        Raises:
            InvalidScenarioIdError: id is not a UUID
            ScenarioNotFoundError: no scenario with that id
        """
        scenario_uuid = parse_scenario_id(scenario_id)
        record = (
            self.db.query(LoanScenarioRecord)
            .filter(LoanScenarioRecord.id == scenario_uuid)
            .first()
        )
        if record is None:
            raise ScenarioNotFoundError(f"Scenario not found: {scenario_id}")
        return record

    def list_scenarios(self, limit: Optional[int] = None) -> List[LoanScenarioRecord]:
        """Newest first"""
        query = self.db.query(LoanScenarioRecord).order_by(LoanScenarioRecord.created_at.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def delete_scenario(self, scenario_id: str) -> None:
        record = self.get_scenario(scenario_id)
        self.db.delete(record)
        self.db.flush()
