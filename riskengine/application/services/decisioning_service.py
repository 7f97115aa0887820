"""Decisioning service - the engine's contract surface for callers."""

import random
from datetime import date, datetime
from typing import Optional, Union

import structlog

from riskengine.core.metrics import (
    record_card_offer,
    record_credit_decision,
    record_fraud_alert,
    record_operation_error,
    record_risk_check,
    record_schedule,
    track_operation_latency,
)
from riskengine.domain.entities import (
    AlertSeverity,
    AlertType,
    CardOffer,
    CheckType,
    CreditDecision,
    CreditProfile,
    FraudAlert,
    LoanOffer,
    LoanTerms,
    LoanType,
    PaymentSchedule,
    RiskResult,
    RiskStatus,
)
from riskengine.domain.exceptions import InvalidLoanTermsException, UnknownCategoryException
from riskengine.service.lending import (
    CardPolicySettings,
    CreditPolicySettings,
    LoanPricingSettings,
    amortize,
    card_policy_settings,
    credit_policy_settings,
    decide_credit,
    loan_pricing_settings,
    price_card,
    price_loan,
)
from riskengine.service.risk import (
    RiskSettings,
    assess_kyc,
    generate_fraud_alert,
    risk_settings,
    run_compliance_check,
)
from riskengine.service.risk.sources import ScoreInput

logger = structlog.get_logger(__name__)


class DecisioningService:
    """
    Application service exposing the engine operations.

    Composes the pure components per call, logs each outcome and records
    metrics. It never writes audit entries: callers forward the returned
    records (``to_dict()``) to their audit sink.

    A random generator passed here is used for every call that needs one;
    otherwise each call draws from its own fresh generator. Share a seeded
    service only between callers that want a common, reproducible stream.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        credit_settings: CreditPolicySettings = credit_policy_settings,
        pricing_settings: LoanPricingSettings = loan_pricing_settings,
        risk_settings: RiskSettings = risk_settings,
        card_settings: CardPolicySettings = card_policy_settings,
    ):
        self._rng = rng
        self._credit_settings = credit_settings
        self._pricing_settings = pricing_settings
        self._risk_settings = risk_settings
        self._card_settings = card_settings

    def amortize(self, terms: LoanTerms, start_date: date) -> PaymentSchedule:
        """
        Build the amortization schedule for a loan.

        Raises:
            InvalidLoanTermsException: If principal or term are not positive,
                or the rate is negative
        """
        log = logger.bind(
            principal=terms.principal,
            annual_rate_percent=terms.annual_rate_percent,
            term_months=terms.term_months,
        )

        try:
            with track_operation_latency("amortize"):
                schedule = amortize(terms, start_date)
        except InvalidLoanTermsException as e:
            record_operation_error("amortize", e.code)
            log.warning("invalid_loan_terms", errors=e.errors)
            raise

        record_schedule()
        log.info(
            "schedule_built",
            monthly_payment=round(schedule.monthly_payment, 2),
            total_interest=round(schedule.total_interest, 2),
        )
        return schedule

    def decide_credit(self, profile: CreditProfile) -> CreditDecision:
        """Apply the credit policy. Declines are returned, never raised."""
        with track_operation_latency("decide_credit"):
            decision = decide_credit(profile, self._credit_settings)

        record_credit_decision(decision.approved, decision.limit)
        logger.info(
            "credit_decision_made",
            credit_score=profile.credit_score,
            debt_to_income_percent=profile.debt_to_income_percent,
            approved=decision.approved,
            reason=decision.reason,
            limit=decision.limit,
            tier=decision.tier.value if decision.tier else None,
        )
        return decision

    def price_loan(
        self,
        loan_type: Union[LoanType, str],
        principal: float,
        term_months: int,
        credit_score: int,
        start_date: date,
    ) -> LoanOffer:
        """
        Price a loan for an applicant and build its schedule.

        Raises:
            UnknownCategoryException: If loan_type is not a known product
            InvalidLoanTermsException: If principal or term are out of range
        """
        log = logger.bind(loan_type=str(loan_type), principal=principal, term_months=term_months)

        try:
            with track_operation_latency("price_loan"):
                offer = price_loan(
                    loan_type,
                    principal,
                    term_months,
                    credit_score,
                    start_date,
                    self._pricing_settings,
                )
        except (InvalidLoanTermsException, UnknownCategoryException) as e:
            record_operation_error("price_loan", e.code)
            log.warning("loan_pricing_rejected", error=e.message, code=e.code)
            raise

        record_schedule()
        log.info(
            "loan_priced",
            annual_rate_percent=offer.annual_rate_percent,
            monthly_payment=round(offer.monthly_payment, 2),
            origination_fee=round(offer.origination_fee, 2),
        )
        return offer

    def price_card(self, credit_score: int) -> CardOffer:
        """Pick a card tier for a credit score and draw its limit and APR."""
        with track_operation_latency("price_card"):
            offer = price_card(credit_score, self._rng, self._card_settings)

        record_card_offer(offer.tier.value)
        logger.info(
            "card_priced",
            credit_score=credit_score,
            tier=offer.tier.value,
            credit_limit=offer.credit_limit,
            apr_percent=offer.apr_percent,
        )
        return offer

    def assess_kyc(
        self,
        subject_id: str,
        score: ScoreInput,
        elevated_status: Optional[Union[RiskStatus, str]] = None,
        now: Optional[datetime] = None,
    ) -> RiskResult:
        """
        Run a KYC assessment.

        Args:
            subject_id: Customer identifier
            score: Raw 0-1 score or a RiskScoreSource
            elevated_status: failed or pending-review for elevated scores;
                the risk settings default applies when omitted
            now: Evaluation time
        """
        with track_operation_latency("assess_kyc"):
            result = assess_kyc(
                subject_id,
                score,
                rng=self._rng,
                now=now,
                elevated_status=elevated_status,
                settings=self._risk_settings,
            )

        self._record_risk_result(result, "kyc_assessed")
        return result

    def run_compliance_check(
        self,
        subject_id: str,
        check_type: Union[CheckType, str],
        score: ScoreInput,
        now: Optional[datetime] = None,
    ) -> RiskResult:
        """
        Run one compliance check.

        Raises:
            UnknownCategoryException: If check_type is not a known check family
        """
        try:
            with track_operation_latency("run_compliance_check"):
                result = run_compliance_check(
                    subject_id,
                    check_type,
                    score,
                    rng=self._rng,
                    now=now,
                    settings=self._risk_settings,
                )
        except UnknownCategoryException as e:
            record_operation_error("run_compliance_check", e.code)
            logger.warning("unknown_category", subject_id=subject_id, kind=e.kind, value=str(e.value))
            raise

        self._record_risk_result(result, "compliance_check_completed")
        return result

    def raise_fraud_alert(
        self,
        subject_id: str,
        alert_type: Union[AlertType, str] = AlertType.TRANSACTION,
        severity: Optional[Union[AlertSeverity, str]] = None,
        now: Optional[datetime] = None,
    ) -> FraudAlert:
        """
        Raise a fraud alert with status NEW.

        Raises:
            UnknownCategoryException: If alert_type is not a known alert family
        """
        try:
            with track_operation_latency("raise_fraud_alert"):
                alert = generate_fraud_alert(
                    subject_id,
                    alert_type,
                    severity,
                    rng=self._rng,
                    now=now,
                    settings=self._risk_settings,
                )
        except UnknownCategoryException as e:
            record_operation_error("raise_fraud_alert", e.code)
            logger.warning("unknown_category", subject_id=subject_id, kind=e.kind, value=str(e.value))
            raise

        record_fraud_alert(alert.alert_type.value, alert.severity.value)
        logger.info(
            "fraud_alert_raised",
            subject_id=subject_id,
            alert_id=alert.id,
            alert_type=alert.alert_type.value,
            severity=alert.severity.value,
            risk_score=alert.risk_score,
        )
        return alert

    def _record_risk_result(self, result: RiskResult, event: str) -> None:
        record_risk_check(result.check_type.value, result.status.value, result.flags)
        logger.info(
            event,
            subject_id=result.subject_id,
            check_type=result.check_type.value,
            status=result.status.value,
            risk_score=result.risk_score,
            flag_types=[flag_type.value for flag_type in result.flag_types],
        )
