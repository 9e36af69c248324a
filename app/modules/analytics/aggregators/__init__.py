# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/aggregators/__init__.py
"""

from .central_metrics import compute_metrics, failed_metrics

__all__ = ["compute_metrics", "failed_metrics"]
