"""Application services for identity management."""

from gatehouse_identity.application.services.user_service import UserService

__all__ = ["UserService"]
