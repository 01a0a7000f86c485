"""SQLAlchemy models for ledgercalc database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

SETTINGS_ROW_ID = 1


class CompanySetting(Base):
    """Company calculation settings (a single row)."""

    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True)
    amt_dec = Column(Integer, default=2, nullable=False)
    loc_amt_dec = Column(Integer, default=2, nullable=False)
    cty_amt_dec = Column(Integer, default=2, nullable=False)
    exh_rate_dec = Column(Integer, default=6, nullable=False)
    has_country_currency = Column(Boolean, default=False, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class ExchangeRate(Base):
    """Exchange rate of a currency effective from a date."""

    __tablename__ = "exchange_rates"

    id = Column(Integer, primary_key=True)
    currency_id = Column(Integer, nullable=False, index=True)
    valid_from = Column(Date, nullable=False)
    rate = Column(Numeric(20, 10), nullable=False)
    is_local = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("currency_id", "valid_from", "is_local", name="uq_currency_date_kind"),
    )


class TaxRate(Base):
    """Tax percentage of a tax code effective from a date."""

    __tablename__ = "tax_rates"

    id = Column(Integer, primary_key=True)
    tax_id = Column(Integer, nullable=False, index=True)
    valid_from = Column(Date, nullable=False)
    percentage = Column(Numeric(9, 4), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("tax_id", "valid_from", name="uq_tax_date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
