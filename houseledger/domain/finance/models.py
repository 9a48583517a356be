from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    text,
)
from sqlalchemy.orm import relationship

from houseledger.core.audit import AuditMixin
from houseledger.core.database import Base
from houseledger.domain.finance.category import TransactionCategory


class Bank(AuditMixin, Base):
    """Bank that holds one or more accounts."""

    __tablename__ = "banks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    web_url = Column(String(300), nullable=True)
    address = Column(String(300), nullable=True)
    city = Column(String(100), nullable=True)
    phone = Column(String(50), nullable=True)
    mail = Column(String(200), nullable=True)
    reference_name = Column(String(200), nullable=True)
    country_id = Column(Integer, nullable=True)

    accounts = relationship("Account", back_populates="bank", passive_deletes="all")


class Account(AuditMixin, Base):
    """Bank account owning transactions, balances and cards."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    account_number = Column(String(100), nullable=True)
    description = Column(String(500), nullable=True)
    iban = Column(String(50), nullable=True)
    bic = Column(String(20), nullable=True)
    account_type = Column(String(50), nullable=True)  # checking, savings, credit card...
    currency_id = Column(Integer, nullable=True)
    bank_id = Column(Integer, ForeignKey("banks.id"), nullable=True, index=True)

    # Relationships
    bank = relationship("Bank", back_populates="accounts")
    transactions = relationship("Transaction", back_populates="account", passive_deletes="all")
    balances = relationship("Balance", back_populates="account", passive_deletes="all")
    cards = relationship("Card", back_populates="account", passive_deletes="all")

    @property
    def bank_name(self) -> Optional[str]:
        bank = self.__dict__.get("bank")
        return bank.name if bank is not None else None


class Balance(AuditMixin, Base):
    """Point-in-time balance snapshot of an account."""

    __tablename__ = "balances"
    __table_args__ = (
        Index("ix_balances_account_date", "account_id", "balance_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    balance_date = Column(DateTime, nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)

    account = relationship("Account", back_populates="balances")


class Card(AuditMixin, Base):
    """Payment card attached to an account."""

    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=True)
    card_number = Column(String(50), nullable=True)
    card_type = Column(String(50), nullable=True)
    expiration_date = Column(DateTime, nullable=True)
    cardholder_name = Column(String(200), nullable=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)

    account = relationship("Account", back_populates="cards")


class Transaction(AuditMixin, Base):
    """Financial transaction booked on an account."""

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_account_date", "account_id", "transaction_date"),
        # At most one active row per dedup key.
        Index(
            "uq_transactions_unique_key_active",
            "unique_key",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    transaction_date = Column(DateTime, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    description = Column(String(500), nullable=True)
    unique_key = Column(String(200), nullable=True, index=True)
    category_name = Column(String(100), nullable=True)
    is_category_confirmed = Column(Boolean, nullable=False, default=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    account = relationship("Account", back_populates="transactions")

    @property
    def category(self) -> Optional[TransactionCategory]:
        if not self.category_name or not self.category_name.strip():
            return None
        return TransactionCategory(self.category_name, bool(self.is_category_confirmed))

    @category.setter
    def category(self, value: Optional[TransactionCategory]) -> None:
        if value is None:
            self.category_name = None
            self.is_category_confirmed = False
        else:
            self.category_name = value.name
            self.is_category_confirmed = value.is_confirmed

    @property
    def account_name(self) -> Optional[str]:
        # Only read when the relationship was eagerly loaded.
        account = self.__dict__.get("account")
        return account.name if account is not None else None
