# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/__init__.py

Clientes de integración con servicios externos.
"""

from .youtube_client import YouTubeClient, YouTubeAPIError, VideoMetadata
from .wordpress_client import (
    WordPressClient,
    WordPressAPIError,
    basic_auth_header,
    bearer_auth_header,
)

__all__ = [
    "WordPressClient",
    "WordPressAPIError",
    "basic_auth_header",
    "bearer_auth_header",
    "YouTubeClient",
    "YouTubeAPIError",
    "VideoMetadata",
]
