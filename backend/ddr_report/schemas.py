from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    app: str = Field(..., description="Configured application name")


class RenderRequest(BaseModel):
    markdown: str = Field(..., description="Markdown report returned by the language model")


class RenderResponse(BaseModel):
    html: str = Field(..., description="Rendered HTML fragment, without <html>/<body> wrapper")
    block_count: int = Field(..., description="Number of non-blank blocks recognised in the report")
    characters: int = Field(..., description="Length of the submitted Markdown")


class RenderFileResponse(RenderResponse):
    filename: str = Field(..., description="Original uploaded file name")


class ExportRequest(BaseModel):
    markdown: str = Field(..., description="Markdown report to export")
    format: Literal["md", "html"] = Field(
        default="md",
        description="'md' saves the Markdown as-is, 'html' a printable standalone page.",
    )


class ExportResponse(BaseModel):
    file_name: str = Field(..., description="File name for saving on the client")
    media_type: str = Field(..., description="MIME type of the exported file")
    file_base64: str = Field(..., description="File contents, base64 without a data: prefix")


__all__ = [
    "ExportRequest",
    "ExportResponse",
    "HealthResponse",
    "RenderFileResponse",
    "RenderRequest",
    "RenderResponse",
]
