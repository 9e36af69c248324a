# -*- coding: utf-8 -*-
"""
backend/app/modules/analytics/aggregators/central_metrics.py

Agregador de volumen por central (función pura, sin I/O).

Dado una central y sus registros de "verificação de volume"
(`{date, meta: {volume}}`), calcula:
- totalVolume, postCount, averageVolume
- serie mensual continua (meses sin registros en 0)
- buckets trimestrales (YYYY-Qn) y semestrales (YYYY-Sn), solo con datos
- averageMonthlyVolume y averageMonthlyPosts

Reglas:
- Un registro se excluye si su volumen no es numérico, es <= 0 o no es finito.
- Un registro con volumen válido pero fecha no parseable también se excluye
  (de todo agregado), así todos los totales cuadran entre sí.
- El redondeo a 2 decimales se aplica solo en la salida.

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple, Union

from app.modules.analytics.errors import InvalidInputError
from app.modules.analytics.schemas import CentralMetrics, CentralRef, MonthlyVolume

logger = logging.getLogger(__name__)

# Prefijo numérico al estilo parseFloat: "12.5kg" -> 12.5, "abc" -> inválido
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_TWO_PLACES = Decimal("0.01")


# ─────────────────────────────────────────────────────────────
# Parsing de registros
# ─────────────────────────────────────────────────────────────

def parse_volume(raw: Any) -> Optional[float]:
    """
    Convierte `meta.volume` a float. Devuelve None si el valor debe excluirse
    (ausente, no numérico, no finito o <= 0).
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
    elif isinstance(raw, str):
        match = _NUMBER_PREFIX.match(raw)
        if not match:
            return None
        try:
            value = float(match.group(0))
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_date(raw: Any) -> Optional[datetime]:
    """Parsea la fecha ISO-8601 de un post de WordPress. None si no es válida."""
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _record_volume(record: Any) -> Any:
    if not isinstance(record, Mapping):
        return None
    meta = record.get("meta")
    if isinstance(meta, Mapping):
        return meta.get("volume")
    return None


def _parse_record(record: Any) -> Optional[Tuple[datetime, float]]:
    volume = parse_volume(_record_volume(record))
    if volume is None:
        return None
    when = parse_date(record.get("date"))
    if when is None:
        logger.debug(f"Registro {record.get('id')} con volumen válido y fecha inválida: {record.get('date')!r}")
        return None
    return when, volume


# ─────────────────────────────────────────────────────────────
# Claves de bucket
# ─────────────────────────────────────────────────────────────

def month_key(when: datetime) -> str:
    return f"{when.year:04d}-{when.month:02d}"


def quarter_key(when: datetime) -> str:
    return f"{when.year:04d}-Q{(when.month - 1) // 3 + 1}"


def semester_key(when: datetime) -> str:
    return f"{when.year:04d}-S{1 if when.month <= 6 else 2}"


def _month_index(when: datetime) -> int:
    return when.year * 12 + (when.month - 1)


def _month_key_from_index(index: int) -> str:
    year, month0 = divmod(index, 12)
    return f"{year:04d}-{month0 + 1:02d}"


def month_span(start: datetime, end: datetime) -> List[str]:
    """Meses calendario de start a end (inclusive), en orden cronológico."""
    return [_month_key_from_index(i) for i in range(_month_index(start), _month_index(end) + 1)]


def round2(value: float) -> float:
    """Redondeo half-up a 2 decimales (evita el sesgo de round() con binarios)."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


# ─────────────────────────────────────────────────────────────
# Identidad de la central
# ─────────────────────────────────────────────────────────────

def _central_identity(central: Union[CentralRef, Mapping, None]) -> Dict[str, Any]:
    if central is None:
        return {}
    if isinstance(central, CentralRef):
        return {"central_id": central.id, "central_name": central.name, "central_slug": central.slug}
    if isinstance(central, Mapping):
        return {
            "central_id": central.get("id"),
            "central_name": central.get("name"),
            "central_slug": central.get("slug"),
        }
    raise TypeError(f"central no soportada: {type(central).__name__}")


# ─────────────────────────────────────────────────────────────
# API pública
# ─────────────────────────────────────────────────────────────

def compute_metrics(central: Union[CentralRef, Mapping, None], records: Iterable) -> CentralMetrics:
    """
    Calcula las métricas de volumen de una central.

    Args:
        central: identidad de la central (se copia tal cual a la salida).
        records: secuencia de posts `{date, meta: {volume}}`.

    Raises:
        InvalidInputError: si `records` no es una secuencia de registros.

    Returns:
        CentralMetrics con totales, promedios y series temporales.
    """
    if records is None or isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise InvalidInputError(records)

    identity = _central_identity(central)

    valid: List[Tuple[datetime, float]] = []
    discarded = 0
    for record in records:
        parsed = _parse_record(record)
        if parsed is None:
            discarded += 1
            continue
        valid.append(parsed)

    if discarded:
        logger.debug(f"Central {identity.get('central_name')!r}: {discarded} registros descartados")

    if not valid:
        return CentralMetrics(**identity)

    valid.sort(key=lambda item: (item[0].year, item[0].month))
    months = month_span(valid[0][0], valid[-1][0])

    monthly: Dict[str, float] = dict.fromkeys(months, 0.0)
    quarterly: Dict[str, float] = {}
    semesterly: Dict[str, float] = {}
    volumes: List[float] = []

    for when, volume in valid:
        monthly[month_key(when)] += volume
        q = quarter_key(when)
        quarterly[q] = quarterly.get(q, 0.0) + volume
        s = semester_key(when)
        semesterly[s] = semesterly.get(s, 0.0) + volume
        volumes.append(volume)

    total = math.fsum(volumes)
    post_count = len(volumes)

    return CentralMetrics(
        **identity,
        total_volume=round2(total),
        post_count=post_count,
        average_volume=round2(total / post_count),
        average_monthly_volume=round2(math.fsum(monthly.values()) / len(months)),
        average_monthly_posts=round2(post_count / len(months)),
        monthly_volumes=[MonthlyVolume(month=m, volume=round2(v)) for m, v in monthly.items()],
        quarterly_volumes={k: round2(quarterly[k]) for k in sorted(quarterly)},
        semesterly_volumes={k: round2(semesterly[k]) for k in sorted(semesterly)},
    )


def failed_metrics(central: Union[CentralRef, Mapping, None], error: str) -> CentralMetrics:
    """Entrada en cero anotada con el error, para no bloquear el reporte completo."""
    return CentralMetrics(**_central_identity(central), error=error)


__all__ = [
    "compute_metrics",
    "failed_metrics",
    "parse_volume",
    "parse_date",
    "month_key",
    "quarter_key",
    "semester_key",
    "month_span",
    "round2",
]

# Fin del archivo backend/app/modules/analytics/aggregators/central_metrics.py
