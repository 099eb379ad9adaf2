"""API routes for keymapfmt."""

from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ..host import FormattingProvider, TextEdit

router = APIRouter()

# Global provider instance
_provider: Optional[FormattingProvider] = None


def get_provider() -> FormattingProvider:
    """Get the global formatting provider."""
    global _provider
    if _provider is None:
        _provider = FormattingProvider()
    return _provider


class FormatRequest(BaseModel):
    """Request to format a document."""

    text: str


class FormatResponse(BaseModel):
    """Formatted document."""

    text: str
    changed: bool


class EditsResponse(BaseModel):
    """Edits turning the document into its formatted form."""

    edits: list[TextEdit] = Field(default_factory=list)


def _check_size(text: str) -> None:
    from ..config import settings

    if len(text) > settings.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {settings.max_document_chars} characters",
        )


@router.post("/format", response_model=FormatResponse)
async def format_text(request: FormatRequest):
    """Format a whole keymap document."""
    _check_size(request.text)
    formatted = get_provider().format_text(request.text)
    return FormatResponse(text=formatted, changed=formatted != request.text)


@router.post("/format/edits", response_model=EditsResponse)
async def format_edits(request: FormatRequest):
    """Return the edits that format a keymap document."""
    _check_size(request.text)
    return EditsResponse(edits=get_provider().provide_document_formatting_edits(request.text))


@router.get("/health")
async def health_check():
    """Health check endpoint with formatting settings."""
    from ..config import settings

    config = {
        "template_marker": settings.template_marker,
        "comment_marker": settings.comment_marker,
        "binding_sigil": settings.binding_sigil,
        "content_indent": settings.content_indent,
        "max_document_chars": settings.max_document_chars,
    }

    return {"status": "ok", "service": "keymapfmt", "config": config}
