# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/schemas/__init__.py
"""

from .analytics_schemas import (
    CentralRef,
    MonthlyVolume,
    CentralMetrics,
    AnalysisSummary,
    CentralsAnalysis,
    CentralsAnalysisResponse,
    AnalyticsErrorResponse,
)

__all__ = [
    "CentralRef",
    "MonthlyVolume",
    "CentralMetrics",
    "AnalysisSummary",
    "CentralsAnalysis",
    "CentralsAnalysisResponse",
    "AnalyticsErrorResponse",
]
