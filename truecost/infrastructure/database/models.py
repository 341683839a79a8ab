"""SQLAlchemy ORM models for saved loan scenarios"""

import uuid
from sqlalchemy import Column, Float, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class LoanScenarioRecord(Base):
    """What-if loan saved from the scenarios screen"""

    __tablename__ = "loan_scenarios"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    principal = Column(Float, nullable=False)
    currency = Column(Text, nullable=False, default="CAD")
    term_months = Column(Integer, nullable=False)
    payment_frequency = Column(Text, nullable=False)
    rate_source = Column(Text, nullable=False, default="FIXED")
    fixed_annual_rate = Column(Float, nullable=True)
    spread_over_policy_rate = Column(Float, nullable=True)
    extra_payment_per_period = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
