# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/services/upload_service.py

Upload de videos a YouTube:
- El multipart se vuelca por bloques a un archivo temporal en UPLOAD_DIR,
  cortando con UploadTooLargeError si supera MAX_UPLOAD_SIZE_MB.
- Las escrituras a disco y el upload resumible (bloqueantes) corren en el
  threadpool.
- El archivo temporal se elimina siempre, con éxito o con error.

Fecha: 19/10/2026
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.shared.integrations import VideoMetadata, YouTubeClient

from ..errors import UploadTooLargeError
from ..schemas import UploadedVideo

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def parse_tags(raw: Optional[str]) -> List[str]:
    """'a, b,,c' → ['a', 'b', 'c']"""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def video_summary(response: Dict[str, Any]) -> UploadedVideo:
    snippet = response.get("snippet") or {}
    status = response.get("status") or {}
    thumbnails = snippet.get("thumbnails") or {}
    video_id = response["id"]
    return UploadedVideo(
        id=video_id,
        title=snippet.get("title") or "",
        description=snippet.get("description") or "",
        url=WATCH_URL.format(video_id=video_id),
        thumbnail=(thumbnails.get("default") or {}).get("url") or "",
        privacy_status=status.get("privacyStatus"),
        channel_id=snippet.get("channelId"),
    )


async def save_upload_to_temp(upload: UploadFile, upload_dir: str, max_bytes: int) -> Tuple[Path, int]:
    """
    Guarda el archivo recibido en un temporal dentro de `upload_dir`.

    Raises:
        UploadTooLargeError: si el archivo supera `max_bytes` (el parcial se elimina).
    """
    Path(upload_dir).mkdir(parents=True, exist_ok=True)
    suffix = Path(upload.filename or "").suffix[:16]
    fd, tmp_name = tempfile.mkstemp(prefix="video-", suffix=suffix, dir=upload_dir)
    tmp_path = Path(tmp_name)
    written = 0
    try:
        with os.fdopen(fd, "wb") as out:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_bytes:
                    raise UploadTooLargeError(max_bytes)
                await run_in_threadpool(out.write, chunk)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return tmp_path, written


class VideoUploadService:
    def __init__(self, client: YouTubeClient, *, upload_dir: str, max_bytes: int):
        self.client = client
        self.upload_dir = upload_dir
        self.max_bytes = max_bytes

    async def upload(self, video: UploadFile, metadata: VideoMetadata) -> UploadedVideo:
        """
        Raises:
            UploadTooLargeError: archivo mayor al límite.
            YouTubeAPIError: fallo de autenticación o de la API de YouTube.
        """
        tmp_path, size = await save_upload_to_temp(video, self.upload_dir, self.max_bytes)
        logger.info(
            f"🎬 Subiendo video a YouTube: file={video.filename!r} "
            f"size={size / 1024 / 1024:.2f} MB title={metadata.title!r}"
        )
        try:
            response = await run_in_threadpool(
                self.client.upload_video,
                str(tmp_path),
                metadata,
                video.content_type,
            )
        finally:
            tmp_path.unlink(missing_ok=True)
            logger.debug(f"Archivo temporal eliminado: {tmp_path}")

        summary = video_summary(response)
        logger.info(f"✅ Upload completado: {summary.url}")
        return summary


__all__ = ["VideoUploadService", "save_upload_to_temp", "parse_tags", "video_summary", "CHUNK_SIZE"]

# Fin del archivo backend/app/modules/youtube/services/upload_service.py
