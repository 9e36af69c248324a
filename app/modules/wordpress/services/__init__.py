# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/services/__init__.py
"""

from .oauth_service import (
    WordPressOAuthService,
    normalize_user_data,
    placeholder_user,
    build_deep_link,
)
from .posts_service import VolumePostService

__all__ = [
    "WordPressOAuthService",
    "VolumePostService",
    "normalize_user_data",
    "placeholder_user",
    "build_deep_link",
]
