# -*- coding: utf-8 -*-
"""
backend/app/modules/youtube/services/__init__.py
"""

from .upload_service import VideoUploadService, save_upload_to_temp, parse_tags, video_summary

__all__ = ["VideoUploadService", "save_upload_to_temp", "parse_tags", "video_summary"]
