from fastapi.responses import JSONResponse, PlainTextResponse

from telegate.api.schemas.errors import ErrorDetail, ErrorResponse


def build_error_response(*, status_code: int, code: str, message: str) -> JSONResponse:
    """Wrap ``code`` and ``message`` in the ``{"error": {...}}`` envelope."""
    payload = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))


def build_text_response(text: str, *, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=status_code)
