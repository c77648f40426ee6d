from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from rfp_gateway.core.errors import ValidationError
from rfp_gateway.core.settings import Settings, get_settings
from rfp_gateway.schemas.responses import ExtractResponse
from rfp_gateway.services.file_extractor import extract_text_from_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["intake"])


@router.post("/extract-pdf-text", response_model=ExtractResponse)
async def extract_file(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    raw = await file.read()
    text, filetype = extract_text_from_upload(
        file.filename or "upload",
        raw,
        max_bytes=settings.max_upload_mb * 1024 * 1024,
    )

    if not text or len(text.strip()) < 10:
        raise ValidationError(
            f"Could not extract readable text from {file.filename} ({filetype}). "
            "Try TXT/DOCX/PDF/CSV/XLSX with real text."
        )

    logger.info("Extracted %d characters from %s", len(text), file.filename)
    return ExtractResponse(extracted_text=text, file_type=filetype, characters=len(text))
