from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String

from houseledger.core.audit import AuditMixin
from houseledger.core.database import Base


class Country(AuditMixin, Base):
    """Country reference data (ISO 3166)."""

    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    country_code_alf3 = Column(String(3), nullable=False, index=True)
    country_code_num3 = Column(String(3), nullable=True)


class Currency(AuditMixin, Base):
    """Currency reference data (ISO 4217)."""

    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    currency_code_alf3 = Column(String(3), nullable=False, index=True)
    currency_code_num3 = Column(String(3), nullable=True)


class CurrencyConversionRate(AuditMixin, Base):
    """Exchange rate of a currency on a given day."""

    __tablename__ = "currency_conversion_rates"
    __table_args__ = (
        Index("ix_conversion_rates_code_date", "currency_code_alf3", "referring_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    rate_value = Column(Numeric(18, 6), nullable=False)
    currency_code_alf3 = Column(String(3), nullable=False)
    referring_date = Column(DateTime, nullable=False)
    unique_key = Column(String(100), nullable=True)


class Supplier(AuditMixin, Base):
    """Utility or service supplier (electricity, gas, internet...)."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    unit_measure = Column(String(50), nullable=True)
    description = Column(String(500), nullable=True)
    type = Column(String(100), nullable=True, index=True)
    contract = Column(String(200), nullable=True)


class ServiceUser(AuditMixin, Base):
    """Person the household services are billed to."""

    __tablename__ = "service_users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    surname = Column(String(100), nullable=True)
