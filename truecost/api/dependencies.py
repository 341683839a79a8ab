"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from truecost.infrastructure.database.repositories import ScenarioRepository
from truecost.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_scenario_repository(db: Session = Depends(get_db)) -> ScenarioRepository:
    """Provide a scenario repository bound to the request's session"""
    return ScenarioRepository(db)
