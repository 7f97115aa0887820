"""
Unit Tests for the Credit Decision Policy.

These tests verify:
1. Floors are evaluated in order and only the first failure is reported
2. Threshold boundaries (640 score, 43% DTI, $24,000 income)
3. Limit tiers and caps
4. Limits are rounded down to a multiple of 100
5. DTI helper and decision explanations
"""

import pytest
from pydantic import ValidationError

from riskengine.domain.entities import CreditProfile, CreditTier
from riskengine.service.lending.credit_policy import (
    REASON_APPROVED,
    REASON_HIGH_DTI,
    REASON_LOW_CREDIT_SCORE,
    REASON_LOW_INCOME,
    calculate_dti,
    calculate_limit,
    classify_tier,
    decide_credit,
    explain_credit_decision,
    make_credit_decision,
)
from riskengine.service.lending.settings import CreditPolicySettings


# =============================================================================
# Floor Tests
# =============================================================================

class TestPolicyFloors:
    """Tests for the declining checks of make_credit_decision()."""

    def test_score_below_minimum_declined(self):
        decision = make_credit_decision(639, 20.0, 100_000)

        assert decision.approved is False
        assert decision.reason == REASON_LOW_CREDIT_SCORE
        assert "Credit score" in decision.reason
        assert decision.limit is None
        assert decision.tier is None

    def test_dti_above_maximum_declined(self):
        decision = make_credit_decision(700, 43.5, 100_000)

        assert decision.approved is False
        assert decision.reason == REASON_HIGH_DTI

    def test_income_below_minimum_declined(self):
        decision = make_credit_decision(700, 30.0, 23_999)

        assert decision.approved is False
        assert decision.reason == REASON_LOW_INCOME

    def test_only_first_failure_reported(self):
        """Score is checked before DTI, DTI before income."""
        assert make_credit_decision(500, 80.0, 0).reason == REASON_LOW_CREDIT_SCORE
        assert make_credit_decision(700, 80.0, 0).reason == REASON_HIGH_DTI

    def test_exact_thresholds_approved(self):
        """640 score, 43% DTI and $24,000 income all pass, at the lowest tier."""
        decision = make_credit_decision(640, 43.0, 24_000)

        assert decision.approved is True
        assert decision.reason == REASON_APPROVED
        assert decision.tier == CreditTier.ACCEPTABLE
        assert decision.limit == 4_800  # 24,000 * 0.20

    def test_decline_never_raises_on_extreme_inputs(self):
        decision = make_credit_decision(300, float("inf"), 0)
        assert decision.approved is False


# =============================================================================
# Tier and Limit Tests
# =============================================================================

class TestLimitTiers:
    """Tests for classify_tier() and calculate_limit()."""

    def test_excellent_tier_capped(self):
        """720 score and 36% DTI on $100,000 earns min(50,000, 50,000)."""
        decision = make_credit_decision(720, 36.0, 100_000)

        assert decision.approved is True
        assert decision.tier == CreditTier.EXCELLENT
        assert decision.limit == 50_000

    def test_excellent_tier_income_bound(self):
        decision = make_credit_decision(800, 10.0, 60_000)
        assert decision.limit == 30_000

    def test_good_tier_by_score(self):
        """Preferred score with non-preferred DTI is the good tier."""
        decision = make_credit_decision(720, 40.0, 100_000)

        assert decision.tier == CreditTier.GOOD
        assert decision.limit == 25_000

    def test_good_tier_by_dti(self):
        """Preferred DTI with non-preferred score is the good tier."""
        decision = make_credit_decision(650, 30.0, 50_000)

        assert decision.tier == CreditTier.GOOD
        assert decision.limit == 15_000

    def test_acceptable_tier_capped(self):
        decision = make_credit_decision(700, 40.0, 200_000)

        assert decision.tier == CreditTier.ACCEPTABLE
        assert decision.limit == 10_000

    def test_classify_tier(self):
        assert classify_tier(720, 36.0) == CreditTier.EXCELLENT
        assert classify_tier(719, 36.0) == CreditTier.GOOD
        assert classify_tier(720, 36.1) == CreditTier.GOOD
        assert classify_tier(719, 36.1) == CreditTier.ACCEPTABLE

    def test_limit_rounds_down(self):
        """$33,333 * 0.20 = 6,666.60 rounds down to 6,600."""
        assert calculate_limit(33_333, CreditTier.ACCEPTABLE) == 6_600

    @pytest.mark.parametrize(
        "score,dti,income",
        [
            (640, 43.0, 24_001),
            (655, 38.2, 41_777),
            (725, 12.5, 87_654),
            (780, 40.0, 33_333),
            (690, 35.9, 58_250),
        ],
    )
    def test_approved_limits_are_multiples_of_100(self, score, dti, income):
        decision = make_credit_decision(score, dti, income)

        assert decision.approved is True
        assert decision.limit % 100 == 0
        assert decision.limit <= income


# =============================================================================
# Configuration Tests
# =============================================================================

class TestPolicySettings:
    """Policy constants are configurable."""

    def test_custom_score_floor(self):
        settings = CreditPolicySettings(min_credit_score=600)

        assert make_credit_decision(620, 30.0, 50_000, settings=settings).approved is True
        assert make_credit_decision(620, 30.0, 50_000).approved is False

    def test_custom_rounding_unit(self):
        settings = CreditPolicySettings(limit_rounding_unit=1_000)
        decision = make_credit_decision(700, 40.0, 33_333, settings=settings)
        assert decision.limit == 6_000

    def test_preferred_score_below_floor_rejected(self):
        with pytest.raises(ValidationError):
            CreditPolicySettings(min_credit_score=700, preferred_credit_score=650)

    def test_preferred_dti_above_ceiling_rejected(self):
        with pytest.raises(ValidationError):
            CreditPolicySettings(max_dti_percent=40.0, preferred_dti_percent=45.0)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CREDIT_MIN_ANNUAL_INCOME", "30000")
        settings = CreditPolicySettings()
        assert settings.min_annual_income == 30_000.0


# =============================================================================
# Helper Tests
# =============================================================================

class TestCreditHelpers:
    """Tests for decide_credit(), calculate_dti() and explain_credit_decision()."""

    def test_decide_credit_uses_profile(self):
        profile = CreditProfile(credit_score=720, debt_to_income_percent=36.0, annual_income=100_000)
        assert decide_credit(profile) == make_credit_decision(720, 36.0, 100_000)

    def test_profile_is_not_mutated(self):
        profile = CreditProfile(credit_score=700, debt_to_income_percent=30.0, annual_income=50_000)
        decide_credit(profile)
        assert profile == CreditProfile(credit_score=700, debt_to_income_percent=30.0, annual_income=50_000)

    def test_calculate_dti(self):
        assert calculate_dti(1_500, 5_000) == 30.0
        assert calculate_dti(0, 5_000) == 0.0
        assert calculate_dti(0, 0) == 0.0
        assert calculate_dti(500, 0) == float("inf")

    def test_explain_declined(self):
        profile = CreditProfile(credit_score=600, debt_to_income_percent=30.0, annual_income=50_000)
        explanation = explain_credit_decision(decide_credit(profile), profile)

        assert "Decision: DECLINED" in explanation
        assert REASON_LOW_CREDIT_SCORE in explanation
        assert "below minimum 640" in explanation

    def test_explain_approved(self):
        profile = CreditProfile(credit_score=720, debt_to_income_percent=36.0, annual_income=100_000)
        explanation = explain_credit_decision(decide_credit(profile), profile)

        assert "Decision: APPROVED ($50,000 limit, excellent tier)" in explanation
        assert "(preferred)" in explanation

    def test_decision_to_dict(self):
        data = make_credit_decision(720, 36.0, 100_000).to_dict()
        assert data == {
            "approved": True,
            "reason": REASON_APPROVED,
            "limit": 50_000,
            "tier": "excellent",
        }
