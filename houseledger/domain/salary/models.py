from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String

from houseledger.core.audit import AuditMixin
from houseledger.core.database import Base


class Salary(AuditMixin, Base):
    """Monthly salary slip, in the paid currency and converted to EUR."""

    __tablename__ = "salaries"
    __table_args__ = (
        Index("ix_salaries_user_date", "user_id", "salary_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    salary_value = Column(Numeric(14, 2), nullable=False)
    salary_value_eur = Column(Numeric(14, 2), nullable=False, default=0)
    salary_date = Column(DateTime, nullable=False)
    refer_year = Column(String(4), nullable=True, index=True)
    refer_month = Column(String(2), nullable=True)
    file_name = Column(String(260), nullable=True)
    exchange_rate = Column(Numeric(18, 6), nullable=False, default=1)
    currency_id = Column(Integer, nullable=True)
    user_id = Column(Integer, nullable=True)
