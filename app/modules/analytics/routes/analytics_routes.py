# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/routes/analytics_routes.py

Endpoint de análisis de volumen por central (consumido por el dashboard).

GET /analytics/centrals-analysis  (sin autenticación)

Respuestas:
- 200 {success: true, data: {centrals, summary, generatedAt}}
- 500 {success: false, error, message} si falta configuración de WordPress
  o si no se pudo obtener la lista de centrales.

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.modules.analytics.dependencies import get_centrals_analysis_service
from app.modules.analytics.errors import ConfigurationMissingError, UpstreamUnavailableError
from app.modules.analytics.schemas import AnalyticsErrorResponse, CentralsAnalysisResponse
from app.modules.analytics.services import CentralsAnalysisService
from app.shared.utils.json_response import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def configuration_missing_response(exc: ConfigurationMissingError):
    return error_response(
        "Configuración de WordPress no encontrada",
        status_code=500,
        message=str(exc),
    )


@router.get(
    "/centrals-analysis",
    response_model=CentralsAnalysisResponse,
    response_model_exclude_none=True,
    responses={500: {"model": AnalyticsErrorResponse}},
    summary="Análisis de volumen por central",
    description=(
        "Obtiene todas las centrales de WordPress, busca sus verificaciones de "
        "volumen y calcula totales, promedios y series mensual/trimestral/semestral."
    ),
)
async def centrals_analysis(
    service: CentralsAnalysisService = Depends(get_centrals_analysis_service),
):
    logger.info("📊 Iniciando análisis de centrales...")
    try:
        analysis = await service.analyze()
    except UpstreamUnavailableError as e:
        logger.error(f"❌ Error en el análisis de centrales: {e}")
        return error_response("Error interno del servidor", status_code=500, message=str(e))

    return CentralsAnalysisResponse(data=analysis)


__all__ = ["router", "configuration_missing_response"]

# Fin del archivo backend/app/modules/analytics/routes/analytics_routes.py
