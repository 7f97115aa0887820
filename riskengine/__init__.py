"""
Risk Engine - Banking Decisioning & Risk-Scoring Library

Pure, stateless components that turn customer financial attributes into
loan amortization schedules, credit decisions, loan and card offers,
KYC/compliance risk assessments and fraud alerts.
"""

__version__ = "0.1.0"
