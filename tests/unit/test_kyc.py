"""
Unit Tests for KYC Risk Assessment.

These tests verify:
1. Low scores pass with no flags
2. Elevated scores carry the caller's status and 1-3 distinct flags
3. Flag severity boundaries (0.3 elevated, above 0.7 high)
4. Out-of-range inputs are rejected
5. Seeded generators make results reproducible
"""

import random

import pytest

from riskengine.domain.entities import (
    CheckType,
    Flag,
    FlagSeverity,
    FlagType,
    RiskResult,
    RiskStatus,
    ScoreScale,
)
from riskengine.service.risk.kyc import NOTES_CLEAR, NOTES_FLAGGED, assess_kyc, kyc_flag_severity
from riskengine.service.risk.catalog import KYC_CATALOG
from riskengine.service.risk.settings import RiskSettings
from riskengine.service.risk.sources import FixedScoreSource, SequenceScoreSource


# =============================================================================
# Outcome Tests
# =============================================================================

class TestKycOutcomes:
    """Tests for assess_kyc() status and flags."""

    def test_low_score_passes(self, rng, now):
        result = assess_kyc("cust-1", 0.1, rng=rng, now=now)

        assert result.status == RiskStatus.PASSED
        assert result.flags == ()
        assert result.notes == NOTES_CLEAR
        assert result.check_type == CheckType.KYC
        assert result.score_scale == ScoreScale.UNIT
        assert result.timestamp == now
        assert result.subject_id == "cust-1"

    def test_high_score_defaults_to_pending_review(self, rng, now):
        result = assess_kyc("cust-1", 0.9, rng=rng, now=now)

        assert result.status == RiskStatus.PENDING_REVIEW
        assert 1 <= len(result.flags) <= 3
        assert all(flag.severity == FlagSeverity.HIGH for flag in result.flags)
        assert all(flag.type in KYC_CATALOG for flag in result.flags)
        assert result.notes == NOTES_FLAGGED

    def test_caller_chooses_failed(self, rng, now):
        result = assess_kyc("cust-1", 0.9, rng=rng, now=now, elevated_status=RiskStatus.FAILED)
        assert result.status == RiskStatus.FAILED

    def test_elevated_status_by_name(self, rng, now):
        result = assess_kyc("cust-1", 0.9, rng=rng, now=now, elevated_status="failed")

        assert result.status is RiskStatus.FAILED
        assert result.to_dict()["status"] == "failed"

    def test_settings_choose_elevated_status(self, rng, now):
        settings = RiskSettings(kyc_elevated_status=RiskStatus.FAILED)
        result = assess_kyc("cust-1", 0.5, rng=rng, now=now, settings=settings)
        assert result.status == RiskStatus.FAILED

    def test_mid_score_medium_flags(self, rng, now):
        result = assess_kyc("cust-1", 0.5, rng=rng, now=now)

        assert result.status != RiskStatus.PASSED
        assert all(flag.severity == FlagSeverity.MEDIUM for flag in result.flags)

    def test_elevated_boundary_inclusive(self, rng, now):
        """0.3 is elevated; just below is not."""
        assert assess_kyc("cust-1", 0.3, rng=rng, now=now).status != RiskStatus.PASSED
        assert assess_kyc("cust-1", 0.2999, rng=rng, now=now).status == RiskStatus.PASSED

    def test_high_severity_boundary_exclusive(self):
        assert kyc_flag_severity(0.7) == FlagSeverity.MEDIUM
        assert kyc_flag_severity(0.7001) == FlagSeverity.HIGH

    def test_score_source(self, rng, now):
        source = SequenceScoreSource([0.05, 0.95])

        assert assess_kyc("cust-1", source, rng=rng, now=now).status == RiskStatus.PASSED
        assert assess_kyc("cust-1", source, rng=rng, now=now).status == RiskStatus.PENDING_REVIEW

    @pytest.mark.parametrize("seed", range(25))
    def test_flags_unique_for_many_seeds(self, seed, now):
        result = assess_kyc("cust-1", 0.8, rng=random.Random(seed), now=now)

        types = [flag.type for flag in result.flags]
        assert 1 <= len(types) <= 3
        assert len(types) == len(set(types))

    def test_result_to_dict(self, rng, now):
        data = assess_kyc("cust-1", 0.1, rng=rng, now=now).to_dict()

        assert data["check_type"] == "kyc"
        assert data["status"] == "passed"
        assert data["score_scale"] == "unit"
        assert data["timestamp"] == "2024-01-15T12:00:00+00:00"
        assert data["id"].startswith("kyc-")


# =============================================================================
# Validation Tests
# =============================================================================

class TestKycValidation:
    """Rejected inputs."""

    @pytest.mark.parametrize("score", [-0.1, 1.5, 42])
    def test_off_scale_score(self, score, rng, now):
        with pytest.raises(ValueError):
            assess_kyc("cust-1", score, rng=rng, now=now)

    def test_passed_is_not_an_elevated_status(self, rng, now):
        with pytest.raises(ValueError):
            assess_kyc("cust-1", 0.9, rng=rng, now=now, elevated_status=RiskStatus.PASSED)

    @pytest.mark.parametrize("status", ["passed", "rejected"])
    def test_bad_elevated_status_name(self, status, rng, now):
        with pytest.raises(ValueError):
            assess_kyc("cust-1", 0.9, rng=rng, now=now, elevated_status=status)

    def test_settings_reject_passed_elevated_status(self):
        with pytest.raises(ValueError):
            RiskSettings(kyc_elevated_status=RiskStatus.PASSED)

    def test_duplicate_flag_types_rejected(self, now):
        flag = Flag(type=FlagType.IDENTITY, severity=FlagSeverity.LOW, description="dup")

        with pytest.raises(ValueError):
            RiskResult(
                id="kyc-1",
                subject_id="cust-1",
                check_type=CheckType.KYC,
                status=RiskStatus.FAILED,
                risk_score=0.9,
                score_scale=ScoreScale.UNIT,
                timestamp=now,
                flags=(flag, flag),
            )


# =============================================================================
# Determinism Tests
# =============================================================================

class TestKycDeterminism:
    """Same seed, same inputs, same result."""

    def test_same_seed_same_result(self, now):
        first = assess_kyc("cust-1", FixedScoreSource(0.85), rng=random.Random(99), now=now)
        second = assess_kyc("cust-1", FixedScoreSource(0.85), rng=random.Random(99), now=now)

        assert first == second

    def test_unseeded_calls_still_valid(self):
        result = assess_kyc("cust-1", 0.9)

        assert result.timestamp.tzinfo is not None
        assert 1 <= len(result.flags) <= 3
