# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/schemas/youtube_schemas.py

Esquemas del setup OAuth de YouTube y del upload de videos.

Fecha: 19/10/2026
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

PrivacyStatus = Literal["private", "unlisted", "public"]


class AuthUrlResponse(BaseModel):
    success: bool = True
    message: str
    auth_url: str
    instructions: List[str]


class ExchangeCodeRequest(BaseModel):
    code: Optional[str] = Field(None, description="Código devuelto por Google tras autorizar")


class TokensResponse(BaseModel):
    success: bool = True
    message: str
    refresh_token: Optional[str] = None
    access_token: Optional[str] = None
    instructions: List[str]


class UploadedVideo(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    url: str
    thumbnail: str = ""
    privacy_status: Optional[str] = None
    channel_id: Optional[str] = None


class UploadResponse(BaseModel):
    success: bool = True
    message: str
    video: UploadedVideo


__all__ = [
    "PrivacyStatus",
    "AuthUrlResponse",
    "ExchangeCodeRequest",
    "TokensResponse",
    "UploadedVideo",
    "UploadResponse",
]

# Fin del archivo backend/app/modules/youtube/schemas/youtube_schemas.py
