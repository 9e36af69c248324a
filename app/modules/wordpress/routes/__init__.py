# -*- coding: utf-8 -*-
"""
backend/app/modules/wordpress/routes/__init__.py
"""

from .wordpress_routes import router

__all__ = ["router"]
