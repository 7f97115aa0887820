"""
Lending Settings for the credit policy, loan pricing and card offers.

Policy constants ship with sensible defaults and can be adjusted via
environment variables for different products or market segments.

Environment variables use the CREDIT_, PRICING_ and CARD_ prefixes:
    CREDIT_MIN_CREDIT_SCORE=660
    CREDIT_MAX_DTI_PERCENT=40
    PRICING_LONG_TERM_SURCHARGE_PERCENT=0.75
    CARD_SECURED_CREDIT_LIMIT=750

Usage:
    from riskengine.service.lending.settings import credit_policy_settings

    # Use default settings (loaded from env)
    floor = credit_policy_settings.min_credit_score

    # Or create custom settings for testing
    custom = CreditPolicySettings(min_credit_score=600)
"""

import json
from functools import lru_cache
from typing import Dict, List, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOAN_TYPES = ("personal", "home", "auto")


class CreditPolicySettings(BaseSettings):
    """
    Configurable thresholds for the credit decision policy.

    All settings can be overridden via environment variables with CREDIT_ prefix.
    Scores are bureau points, DTI values are percentages, money is in currency units.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Credit Score ===
    min_credit_score: int = Field(
        default=640,
        ge=300,
        le=850,
        description="Scores below this are declined",
    )
    preferred_credit_score: int = Field(
        default=720,
        ge=300,
        le=850,
        description="Scores at or above this count toward a better tier",
    )

    # === Debt-to-Income ===
    max_dti_percent: float = Field(
        default=43.0,
        ge=0.0,
        description="DTI above this is declined",
    )
    preferred_dti_percent: float = Field(
        default=36.0,
        ge=0.0,
        description="DTI at or below this counts toward a better tier",
    )

    # === Income ===
    min_annual_income: float = Field(
        default=24_000.0,
        ge=0.0,
        description="Annual income below this is declined",
    )

    # === Limit Tiers (income multiplier, cap) ===
    excellent_income_multiplier: float = Field(default=0.50, ge=0.0, le=1.0)
    excellent_limit_cap: float = Field(default=50_000.0, ge=0.0)
    good_income_multiplier: float = Field(default=0.30, ge=0.0, le=1.0)
    good_limit_cap: float = Field(default=25_000.0, ge=0.0)
    acceptable_income_multiplier: float = Field(default=0.20, ge=0.0, le=1.0)
    acceptable_limit_cap: float = Field(default=10_000.0, ge=0.0)

    limit_rounding_unit: int = Field(
        default=100,
        gt=0,
        description="Approved limits are rounded down to a multiple of this",
    )

    @model_validator(mode="after")
    def check_preferred_thresholds(self) -> "CreditPolicySettings":
        """Preferred thresholds must be at least as strict as the floors."""
        if self.preferred_credit_score < self.min_credit_score:
            raise ValueError(
                f"preferred_credit_score ({self.preferred_credit_score}) "
                f"< min_credit_score ({self.min_credit_score})"
            )
        if self.preferred_dti_percent > self.max_dti_percent:
            raise ValueError(
                f"preferred_dti_percent ({self.preferred_dti_percent}) "
                f"> max_dti_percent ({self.max_dti_percent})"
            )
        return self


class LoanPricingSettings(BaseSettings):
    """
    Rate table and fees used to price a loan from a credit score.

    All settings can be overridden via environment variables with PRICING_ prefix.
    Rates are annual percentages.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Rate Table ===
    rate_table_json: str = Field(
        default=(
            '[[740, {"home": 3.99, "auto": 4.99, "personal": 7.99}],'
            ' [670, {"home": 4.99, "auto": 5.99, "personal": 9.99}],'
            ' [300, {"home": 5.99, "auto": 7.99, "personal": 12.99}]]'
        ),
        description="Base rates as JSON: [[min_credit_score, {loan_type: rate}], ...]",
    )

    # === Term Surcharge ===
    long_term_threshold_months: int = Field(
        default=60,
        gt=0,
        description="Terms longer than this pay the long-term surcharge",
    )
    long_term_surcharge_percent: float = Field(
        default=0.5,
        ge=0.0,
        description="Percentage points added to the base rate for long terms",
    )

    # === Origination Fees (fraction of principal) ===
    personal_origination_fee: float = Field(default=0.02, ge=0.0, le=0.06)
    home_origination_fee: float = Field(default=0.01, ge=0.0, le=0.06)
    auto_origination_fee: float = Field(default=0.01, ge=0.0, le=0.06)

    @field_validator("rate_table_json")
    @classmethod
    def validate_rate_table_json(cls, v: str) -> str:
        """Validate that the rate table is parseable and covers every loan type."""
        try:
            bands = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(bands, list) or not bands:
            raise ValueError("Rate table must be a non-empty list")
        for band in bands:
            if not isinstance(band, list) or len(band) != 2:
                raise ValueError("Each band must be [min_credit_score, {loan_type: rate}]")
            min_score, rates = band
            if not isinstance(min_score, int):
                raise ValueError(f"min_credit_score must be an integer: {min_score!r}")
            if not isinstance(rates, dict) or set(rates) != set(LOAN_TYPES):
                raise ValueError(f"Band {min_score} must price exactly {LOAN_TYPES}")
            if any(rate < 0 for rate in rates.values()):
                raise ValueError(f"Band {min_score} has a negative rate")
        return v

    @property
    def rate_table(self) -> List[Tuple[int, Dict[str, float]]]:
        """Rate bands sorted from the highest credit score floor down."""
        bands = json.loads(self.rate_table_json)
        return sorted(
            ((min_score, rates) for min_score, rates in bands),
            key=lambda band: band[0],
            reverse=True,
        )

    def origination_fee_rate(self, loan_type: str) -> float:
        return {
            "personal": self.personal_origination_fee,
            "home": self.home_origination_fee,
            "auto": self.auto_origination_fee,
        }[loan_type]


class CardPolicySettings(BaseSettings):
    """
    Score tiers and product terms for credit card offers.

    All settings can be overridden via environment variables with CARD_ prefix.
    Limit bands are [min, max) in whole currency units; APR bands are
    [min, max) annual percentages drawn in 0.01 steps.
    """

    model_config = SettingsConfigDict(
        env_prefix="CARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Tier Floors ===
    premium_min_credit_score: int = Field(default=740, ge=300, le=850)
    standard_min_credit_score: int = Field(default=670, ge=300, le=850)

    # === Premium ===
    premium_limit_min: int = Field(default=10_000, gt=0)
    premium_limit_max: int = Field(default=25_000, gt=0)
    premium_apr_min: float = Field(default=11.99, ge=0.0)
    premium_apr_max: float = Field(default=16.99, ge=0.0)
    premium_cash_back_percent: float = Field(default=2.0, ge=0.0)

    # === Standard ===
    standard_limit_min: int = Field(default=3_000, gt=0)
    standard_limit_max: int = Field(default=10_000, gt=0)
    standard_apr_min: float = Field(default=14.99, ge=0.0)
    standard_apr_max: float = Field(default=21.99, ge=0.0)
    standard_cash_back_percent: float = Field(default=1.5, ge=0.0)

    # === Secured ===
    secured_credit_limit: int = Field(
        default=500,
        gt=0,
        description="Fixed limit for secured cards",
    )
    secured_apr_min: float = Field(default=17.99, ge=0.0)
    secured_apr_max: float = Field(default=22.99, ge=0.0)
    secured_cash_back_percent: float = Field(default=1.0, ge=0.0)

    @model_validator(mode="after")
    def check_bands(self) -> "CardPolicySettings":
        if self.standard_min_credit_score > self.premium_min_credit_score:
            raise ValueError("standard_min_credit_score > premium_min_credit_score")
        for tier in ("premium", "standard"):
            if getattr(self, f"{tier}_limit_min") > getattr(self, f"{tier}_limit_max"):
                raise ValueError(f"{tier}_limit_min > {tier}_limit_max")
        for tier in ("premium", "standard", "secured"):
            if getattr(self, f"{tier}_apr_min") > getattr(self, f"{tier}_apr_max"):
                raise ValueError(f"{tier}_apr_min > {tier}_apr_max")
        return self


@lru_cache
def get_credit_policy_settings() -> CreditPolicySettings:
    """Get cached credit policy settings instance."""
    return CreditPolicySettings()


@lru_cache
def get_loan_pricing_settings() -> LoanPricingSettings:
    """Get cached loan pricing settings instance."""
    return LoanPricingSettings()


@lru_cache
def get_card_policy_settings() -> CardPolicySettings:
    """Get cached card policy settings instance."""
    return CardPolicySettings()


credit_policy_settings = get_credit_policy_settings()
loan_pricing_settings = get_loan_pricing_settings()
card_policy_settings = get_card_policy_settings()
