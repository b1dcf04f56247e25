"""Application services for autogroup."""

from autogroup.application.services.autogroup_service import AutogroupService

__all__ = ["AutogroupService"]
