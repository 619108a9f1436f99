"""Endpoints that turn Markdown reports into HTML."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ddr_report.api.deps import get_app_settings
from ddr_report.core.config import Settings
from ddr_report.markdown_renderer import count_blocks, render_markdown
from ddr_report.report_upload import UnsupportedReportError, decode_report_upload
from ddr_report.schemas import RenderFileResponse, RenderRequest, RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])

# Worst case for UTF-8; the character limit is checked again after decoding.
_MAX_BYTES_PER_CHAR = 4


def _check_size(markdown: str, settings: Settings) -> None:
    if len(markdown) > settings.max_markdown_chars:
        logger.warning(
            "Rejected report of %s characters (limit %s)", len(markdown), settings.max_markdown_chars
        )
        raise HTTPException(
            status_code=413,
            detail=f"Report exceeds {settings.max_markdown_chars} characters",
        )


def _render(markdown: str) -> RenderResponse:
    html = render_markdown(markdown)
    block_count = count_blocks(markdown)
    logger.info("Rendered report: %s characters, %s blocks", len(markdown), block_count)
    return RenderResponse(html=html, block_count=block_count, characters=len(markdown))


@router.post("", response_model=RenderResponse)
def render_report(
    payload: RenderRequest,
    settings: Settings = Depends(get_app_settings),
) -> RenderResponse:
    _check_size(payload.markdown, settings)
    return _render(payload.markdown)


@router.post("/file", response_model=RenderFileResponse)
def render_report_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
) -> RenderFileResponse:
    byte_limit = settings.max_markdown_chars * _MAX_BYTES_PER_CHAR
    contents = file.file.read(byte_limit + 1)
    if len(contents) > byte_limit:
        logger.warning("Rejected upload '%s' larger than %s bytes", file.filename, byte_limit)
        raise HTTPException(
            status_code=413,
            detail=f"Report exceeds {settings.max_markdown_chars} characters",
        )
    filename = file.filename or "report.md"
    try:
        markdown = decode_report_upload(filename, contents)
    except UnsupportedReportError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    _check_size(markdown, settings)
    rendered = _render(markdown)
    return RenderFileResponse(filename=filename, **rendered.model_dump())
