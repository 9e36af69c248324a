# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/services/__init__.py
"""

from .centrals_analysis_service import CentralsAnalysisService, build_summary

__all__ = ["CentralsAnalysisService", "build_summary"]
