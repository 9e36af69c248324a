# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/routes/__init__.py
"""

from .youtube_routes import router

__all__ = ["router"]
