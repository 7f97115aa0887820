"""
Unit Tests for Credit Card Offers.

These tests verify:
1. Tier boundaries (670 standard, 740 premium)
2. Limits and APRs stay inside each tier's bands
3. Secured cards get the fixed limit
4. Card settings validation
"""

import random

import pytest
from pydantic import ValidationError

from riskengine.domain.entities import CardTier
from riskengine.service.lending.cards import classify_card_tier, draw_apr, price_card
from riskengine.service.lending.settings import CardPolicySettings


# =============================================================================
# Tier Tests
# =============================================================================

class TestCardTiers:
    """Tests for classify_card_tier()."""

    @pytest.mark.parametrize(
        "score,tier",
        [
            (300, CardTier.SECURED),
            (669, CardTier.SECURED),
            (670, CardTier.STANDARD),
            (739, CardTier.STANDARD),
            (740, CardTier.PREMIUM),
            (850, CardTier.PREMIUM),
        ],
    )
    def test_boundaries(self, score, tier):
        assert classify_card_tier(score) == tier
        assert price_card(score, random.Random(1)).tier == tier

    def test_custom_floors(self):
        settings = CardPolicySettings(standard_min_credit_score=650, premium_min_credit_score=760)

        assert classify_card_tier(655, settings) == CardTier.STANDARD
        assert classify_card_tier(745, settings) == CardTier.STANDARD


# =============================================================================
# Offer Tests
# =============================================================================

class TestPriceCard:
    """Tests for price_card()."""

    @pytest.mark.parametrize("seed", range(20))
    def test_premium_bands(self, seed):
        offer = price_card(780, random.Random(seed))

        assert 10_000 <= offer.credit_limit < 25_000
        assert 11.99 <= offer.apr_percent < 16.99
        assert offer.cash_back_percent == 2.0

    @pytest.mark.parametrize("seed", range(20))
    def test_standard_bands(self, seed):
        offer = price_card(700, random.Random(seed))

        assert 3_000 <= offer.credit_limit < 10_000
        assert 14.99 <= offer.apr_percent < 21.99
        assert offer.cash_back_percent == 1.5

    @pytest.mark.parametrize("seed", range(20))
    def test_secured_terms(self, seed):
        offer = price_card(600, random.Random(seed))

        assert offer.credit_limit == 500
        assert 17.99 <= offer.apr_percent < 22.99
        assert offer.cash_back_percent == 1.0

    def test_apr_has_two_decimals(self, rng):
        offer = price_card(700, rng)
        assert round(offer.apr_percent, 2) == offer.apr_percent

    def test_empty_apr_band(self, rng):
        assert draw_apr(9.99, 9.99, rng) == 9.99

    def test_fixed_limit_setting(self, rng):
        settings = CardPolicySettings(secured_credit_limit=750)
        assert price_card(500, rng, settings).credit_limit == 750

    def test_same_seed_same_offer(self):
        assert price_card(745, random.Random(8)) == price_card(745, random.Random(8))

    def test_to_dict(self, rng):
        data = price_card(600, rng).to_dict()

        assert data["tier"] == "secured"
        assert data["credit_limit"] == 500


# =============================================================================
# Settings Tests
# =============================================================================

class TestCardSettings:
    """Validation of the card configuration."""

    def test_floors_out_of_order(self):
        with pytest.raises(ValidationError):
            CardPolicySettings(standard_min_credit_score=750, premium_min_credit_score=700)

    def test_inverted_limit_band(self):
        with pytest.raises(ValidationError):
            CardPolicySettings(premium_limit_min=30_000, premium_limit_max=20_000)

    def test_inverted_apr_band(self):
        with pytest.raises(ValidationError):
            CardPolicySettings(secured_apr_min=25.0, secured_apr_max=20.0)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CARD_SECURED_CREDIT_LIMIT", "750")
        assert CardPolicySettings().secured_credit_limit == 750
