# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/routes/__init__.py
"""

from .analytics_routes import router, configuration_missing_response

__all__ = ["router", "configuration_missing_response"]
