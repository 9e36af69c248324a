# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/schemas/analytics_schemas.py

Esquemas (Pydantic v2) del análisis de volumen por central.
Los atributos son snake_case en Python y se serializan en camelCase
(`totalVolume`, `monthlyVolumes`, ...) que es lo que consume el dashboard.

Fecha: 19/10/2026
"""
from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Entradas
# ---------------------------------------------------------------------------
class CentralRef(CamelModel):
    """Identidad de una central tal como la expone WordPress."""
    id: Optional[Union[int, str]] = Field(None, description="ID del post `central` en WordPress")
    name: Optional[str] = Field(None, description="Nombre visible (title.rendered)")
    slug: Optional[str] = Field(None, description="Slug del post")


# ---------------------------------------------------------------------------
# Métricas por central
# ---------------------------------------------------------------------------
class MonthlyVolume(CamelModel):
    month: str = Field(..., description="Mes en formato YYYY-MM")
    volume: float = Field(..., description="Volumen (kg) del mes, 0 si no hubo registros")


class CentralMetrics(CamelModel):
    """
    Métricas de volumen de una central. Transitorio: se construye por
    request y nunca se persiste.
    """
    central_id: Optional[Union[int, str]] = Field(None, description="ID de la central")
    central_name: Optional[str] = Field(None, description="Nombre de la central")
    central_slug: Optional[str] = Field(None, description="Slug de la central")

    total_volume: float = Field(0.0, description="Suma de volúmenes válidos (2 decimales)")
    post_count: int = Field(0, ge=0, description="Registros con volumen numérico > 0")
    average_volume: float = Field(0.0, description="total_volume / post_count")
    average_monthly_volume: float = Field(0.0, description="Promedio de la serie mensual (incluye meses en 0)")
    average_monthly_posts: float = Field(0.0, description="post_count / meses del rango")

    monthly_volumes: List[MonthlyVolume] = Field(
        default_factory=list,
        description="Serie mensual continua del primer al último mes con registros",
    )
    quarterly_volumes: Dict[str, float] = Field(
        default_factory=dict,
        description="Volumen por trimestre (YYYY-Qn), solo trimestres con datos",
    )
    semesterly_volumes: Dict[str, float] = Field(
        default_factory=dict,
        description="Volumen por semestre (YYYY-Sn), solo semestres con datos",
    )

    error: Optional[str] = Field(None, description="Mensaje si la central no pudo procesarse")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "centralId": 12,
                "centralName": "Central Norte",
                "centralSlug": "central-norte",
                "totalVolume": 30.0,
                "postCount": 2,
                "averageVolume": 15.0,
                "averageMonthlyVolume": 10.0,
                "averageMonthlyPosts": 0.67,
                "monthlyVolumes": [
                    {"month": "2024-01", "volume": 10.0},
                    {"month": "2024-02", "volume": 0.0},
                    {"month": "2024-03", "volume": 20.0},
                ],
                "quarterlyVolumes": {"2024-Q1": 30.0},
                "semesterlyVolumes": {"2024-S1": 30.0},
            }
        },
    )


# ---------------------------------------------------------------------------
# Resumen y respuesta
# ---------------------------------------------------------------------------
class AnalysisSummary(CamelModel):
    total_centrals: int = Field(0, ge=0)
    total_volume: float = Field(0.0)
    total_posts: int = Field(0, ge=0)
    average_volume_per_central: float = Field(0.0)


class CentralsAnalysis(CamelModel):
    centrals: List[CentralMetrics] = Field(default_factory=list)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)
    generated_at: str = Field(..., description="Timestamp ISO-8601 (UTC) de generación")


class CentralsAnalysisResponse(CamelModel):
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    data: CentralsAnalysis


class AnalyticsErrorResponse(CamelModel):
    success: bool = False
    error: str
    message: Optional[str] = None


__all__ = [
    "CentralRef",
    "MonthlyVolume",
    "CentralMetrics",
    "AnalysisSummary",
    "CentralsAnalysis",
    "CentralsAnalysisResponse",
    "AnalyticsErrorResponse",
]

# Fin del archivo backend/app/modules/analytics/schemas/analytics_schemas.py
