from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Scenario defaults (the calculator's starting inputs)
    default_annual_premium: Decimal = Decimal("45000")
    default_max_non_mec_premium: Decimal = Decimal("50232")
    default_monthly_bills: Decimal = Decimal("3000")
    default_policy_rate: Decimal = Decimal("6.2")
    default_loan_rate: Decimal = Decimal("0.0")
    default_cashback_rate: Decimal = Decimal("2.0")
    default_policy_length: int = 30

    # Export file names
    projection_export_filename: str = "annual_projection.csv"
    ledger_export_filename: str = "policy_details.csv"


settings = Settings()
