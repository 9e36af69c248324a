# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/repositories/__init__.py
"""

from .content_repository import ContentRepository, WordPressContentRepository, to_central_ref

__all__ = ["ContentRepository", "WordPressContentRepository", "to_central_ref"]
