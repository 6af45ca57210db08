"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .like_service import LikeService
from .notification_service import NotificationService

__all__ = [
    "JWTService",
    "LikeService",
    "NotificationService",
    "Service",
]
