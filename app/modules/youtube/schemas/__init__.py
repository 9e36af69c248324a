# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/schemas/__init__.py
"""

from .youtube_schemas import (
    PrivacyStatus,
    AuthUrlResponse,
    ExchangeCodeRequest,
    TokensResponse,
    UploadedVideo,
    UploadResponse,
)

__all__ = [
    "PrivacyStatus",
    "AuthUrlResponse",
    "ExchangeCodeRequest",
    "TokensResponse",
    "UploadedVideo",
    "UploadResponse",
]
