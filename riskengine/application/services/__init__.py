"""Application Services - Use case orchestration."""

from .decisioning_service import DecisioningService

__all__ = ["DecisioningService"]
