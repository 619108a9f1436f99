"""Endpoints for downloading generated reports."""

from __future__ import annotations

import base64
import logging

from fastapi import APIRouter, Depends, HTTPException

from ddr_report.api.deps import get_app_settings
from ddr_report.core.config import Settings
from ddr_report.report_exporter import export_report, media_type_for
from ddr_report.schemas import ExportRequest, ExportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


@router.post("", response_model=ExportResponse)
def export_report_file(
    payload: ExportRequest,
    settings: Settings = Depends(get_app_settings),
) -> ExportResponse:
    """Save the report on the server and return it for download."""

    try:
        path, data = export_report(
            payload.markdown,
            fmt=payload.format,
            export_dir=settings.export_dir,
            filename_prefix=settings.report_filename_prefix,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info("Exported report to %s (%s bytes)", path, len(data))
    return ExportResponse(
        file_name=path.name,
        media_type=media_type_for(payload.format),
        file_base64=base64.b64encode(data).decode("ascii"),
    )
