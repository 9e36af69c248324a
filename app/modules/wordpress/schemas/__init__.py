# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/schemas/__init__.py
"""

from .wordpress_schemas import (
    WordPressUser,
    SessionClaims,
    CreatePostRequest,
    MeResponse,
    LogoutResponse,
    CreatePostResponse,
)

__all__ = [
    "WordPressUser",
    "SessionClaims",
    "CreatePostRequest",
    "MeResponse",
    "LogoutResponse",
    "CreatePostResponse",
]
