"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    # Service
    service_name: str = "decision-gateway"
    log_level: str = "INFO"

    # Loan bounds (amount in euros, period in months)
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    # Credit modifiers per risk segment
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Age gate
    estonia_life_expectancy: int = 80
    latvia_life_expectancy: int = 85
    lithuania_life_expectancy: int = 90
    life_expectancy_margin: int = 5
    minimum_age: int = 18

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount must not exceed maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period must not exceed maximum_loan_period")
        if min(self.segment_modifiers) <= 0:
            raise ValueError("segment credit modifiers must be positive")
        return self

    @property
    def segment_modifiers(self) -> tuple[int, int, int]:
        return (
            self.segment_1_credit_modifier,
            self.segment_2_credit_modifier,
            self.segment_3_credit_modifier,
        )


settings = Settings()
