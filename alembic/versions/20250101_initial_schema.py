"""Initial schema: finance, reference data, salaries and house things"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20250101_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("last_updated_date", sa.DateTime(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("note", sa.String(length=1000), nullable=True),
    ]


def _create_table(name: str, *columns) -> None:
    op.create_table(name, sa.Column("id", sa.Integer(), nullable=False), *columns, *_audit_columns(), sa.PrimaryKeyConstraint("id"))
    op.create_index(f"ix_{name}_id", name, ["id"])
    op.create_index(f"ix_{name}_is_active", name, ["is_active"])


def upgrade() -> None:
    _create_table(
        "banks",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("web_url", sa.String(length=300), nullable=True),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("mail", sa.String(length=200), nullable=True),
        sa.Column("reference_name", sa.String(length=200), nullable=True),
        sa.Column("country_id", sa.Integer(), nullable=True),
    )

    _create_table(
        "accounts",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("account_number", sa.String(length=100), nullable=True),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("iban", sa.String(length=50), nullable=True),
        sa.Column("bic", sa.String(length=20), nullable=True),
        sa.Column("account_type", sa.String(length=50), nullable=True),
        sa.Column("currency_id", sa.Integer(), nullable=True),
        sa.Column("bank_id", sa.Integer(), sa.ForeignKey("banks.id"), nullable=True),
    )
    op.create_index("ix_accounts_bank_id", "accounts", ["bank_id"])

    _create_table(
        "balances",
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("balance_date", sa.DateTime(), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=True),
    )
    op.create_index("ix_balances_account_date", "balances", ["account_id", "balance_date"])

    _create_table(
        "cards",
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("card_number", sa.String(length=50), nullable=True),
        sa.Column("card_type", sa.String(length=50), nullable=True),
        sa.Column("expiration_date", sa.DateTime(), nullable=True),
        sa.Column("cardholder_name", sa.String(length=200), nullable=True),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=True),
    )

    _create_table(
        "transactions",
        sa.Column("transaction_date", sa.DateTime(), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("unique_key", sa.String(length=200), nullable=True),
        sa.Column("category_name", sa.String(length=100), nullable=True),
        sa.Column("is_category_confirmed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
    )
    op.create_index("ix_transactions_transaction_date", "transactions", ["transaction_date"])
    op.create_index("ix_transactions_unique_key", "transactions", ["unique_key"])
    op.create_index("ix_transactions_account_id", "transactions", ["account_id"])
    op.create_index("ix_transactions_account_date", "transactions", ["account_id", "transaction_date"])
    op.create_index(
        "uq_transactions_unique_key_active",
        "transactions",
        ["unique_key"],
        unique=True,
        sqlite_where=sa.text("is_active = 1"),
        postgresql_where=sa.text("is_active"),
    )

    _create_table(
        "countries",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("country_code_alf3", sa.String(length=3), nullable=False),
        sa.Column("country_code_num3", sa.String(length=3), nullable=True),
    )
    op.create_index("ix_countries_country_code_alf3", "countries", ["country_code_alf3"])

    _create_table(
        "currencies",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("currency_code_alf3", sa.String(length=3), nullable=False),
        sa.Column("currency_code_num3", sa.String(length=3), nullable=True),
    )
    op.create_index("ix_currencies_currency_code_alf3", "currencies", ["currency_code_alf3"])

    _create_table(
        "currency_conversion_rates",
        sa.Column("rate_value", sa.Numeric(18, 6), nullable=False),
        sa.Column("currency_code_alf3", sa.String(length=3), nullable=False),
        sa.Column("referring_date", sa.DateTime(), nullable=False),
        sa.Column("unique_key", sa.String(length=100), nullable=True),
    )
    op.create_index(
        "ix_conversion_rates_code_date",
        "currency_conversion_rates",
        ["currency_code_alf3", "referring_date"],
    )

    _create_table(
        "suppliers",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("unit_measure", sa.String(length=50), nullable=True),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("type", sa.String(length=100), nullable=True),
        sa.Column("contract", sa.String(length=200), nullable=True),
    )
    op.create_index("ix_suppliers_type", "suppliers", ["type"])

    _create_table(
        "service_users",
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("surname", sa.String(length=100), nullable=True),
    )

    _create_table(
        "salaries",
        sa.Column("salary_value", sa.Numeric(14, 2), nullable=False),
        sa.Column("salary_value_eur", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("salary_date", sa.DateTime(), nullable=False),
        sa.Column("refer_year", sa.String(length=4), nullable=True),
        sa.Column("refer_month", sa.String(length=2), nullable=True),
        sa.Column("file_name", sa.String(length=260), nullable=True),
        sa.Column("exchange_rate", sa.Numeric(18, 6), nullable=False, server_default="1"),
        sa.Column("currency_id", sa.Integer(), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=True),
    )
    op.create_index("ix_salaries_refer_year", "salaries", ["refer_year"])
    op.create_index("ix_salaries_user_date", "salaries", ["user_id", "salary_date"])

    _create_table(
        "rooms",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=True),
        sa.Column("icon", sa.String(length=50), nullable=True),
    )

    _create_table(
        "house_things",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("item_type", sa.String(length=100), nullable=True),
        sa.Column("model", sa.String(length=200), nullable=True),
        sa.Column("cost", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("history_id", sa.Integer(), nullable=False),
        sa.Column("purchase_date", sa.DateTime(), nullable=False),
        sa.Column("room_id", sa.Integer(), sa.ForeignKey("rooms.id"), nullable=True),
    )
    op.create_index("ix_house_things_history_id", "house_things", ["history_id"])
    op.create_index("ix_house_things_room_id", "house_things", ["room_id"])


def downgrade() -> None:
    for table in (
        "house_things",
        "rooms",
        "salaries",
        "service_users",
        "suppliers",
        "currency_conversion_rates",
        "currencies",
        "countries",
        "transactions",
        "cards",
        "balances",
        "accounts",
        "banks",
    ):
        op.drop_table(table)
