# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/services/centrals_analysis_service.py

Orquestación del análisis de centrales:
1. Lista las centrales desde el repositorio de contenido.
2. Por cada central (secuencial), busca sus registros y calcula métricas.
3. Un fallo en una central produce una entrada en cero con `error`,
   sin abortar el lote.
4. Ordena por totalVolume descendente y arma el resumen global.

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import List

from app.modules.analytics.aggregators import compute_metrics, failed_metrics
from app.modules.analytics.aggregators.central_metrics import round2
from app.modules.analytics.errors import AnalyticsError
from app.modules.analytics.repositories import ContentRepository
from app.modules.analytics.schemas import (
    AnalysisSummary,
    CentralMetrics,
    CentralRef,
    CentralsAnalysis,
)

logger = logging.getLogger(__name__)


def build_summary(centrals: List[CentralMetrics]) -> AnalysisSummary:
    total_volume = math.fsum(c.total_volume for c in centrals)
    total_centrals = len(centrals)
    return AnalysisSummary(
        total_centrals=total_centrals,
        total_volume=round2(total_volume),
        total_posts=sum(c.post_count for c in centrals),
        average_volume_per_central=round2(total_volume / total_centrals) if total_centrals else 0.0,
    )


class CentralsAnalysisService:
    def __init__(self, repository: ContentRepository):
        self.repository = repository

    async def analyze_central(self, central: CentralRef) -> CentralMetrics:
        if not central.name:
            logger.warning(f"Central {central.id} sin nombre; no es posible buscar sus registros")
            return failed_metrics(central, "Central sin nombre")
        try:
            records = await self.repository.search_volume_records(central.name)
            return compute_metrics(central, records)
        except AnalyticsError as e:
            logger.error(f"❌ Error procesando central {central.name!r}: {e}")
            return failed_metrics(central, str(e))
        except Exception as e:
            logger.exception(f"❌ Error inesperado procesando central {central.name!r}: {e}")
            return failed_metrics(central, str(e))

    async def analyze(self) -> CentralsAnalysis:
        """
        Raises:
            UpstreamUnavailableError: si no se puede obtener la lista de centrales.
        """
        centrals = await self.repository.list_centrals()

        results: List[CentralMetrics] = []
        for central in centrals:
            results.append(await self.analyze_central(central))

        # sort estable: empates conservan el orden de WordPress
        results.sort(key=lambda m: m.total_volume, reverse=True)

        failed = sum(1 for r in results if r.error)
        logger.info(f"📊 Análisis de {len(results)} centrales completado ({failed} con error)")

        return CentralsAnalysis(
            centrals=results,
            summary=build_summary(results),
            generated_at=datetime.now(timezone.utc).isoformat(),
        )


__all__ = ["CentralsAnalysisService", "build_summary"]

# Fin del archivo backend/app/modules/analytics/services/centrals_analysis_service.py
