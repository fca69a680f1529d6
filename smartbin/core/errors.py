import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

class AppError(Exception):
    status_code = 500
    default_message = "An internal server error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class NotFound(AppError):
    status_code = 404
    default_message = "Not found"

class InvalidInput(AppError):
    status_code = 400
    default_message = "Invalid input"

class InvalidCategory(InvalidInput):
    default_message = "Invalid category"

class PayloadTooLarge(InvalidInput):
    status_code = 413
    default_message = "File too large"

class Conflict(AppError):
    status_code = 409
    default_message = "Already exists"

class UpstreamFailure(AppError):
    """The media host rejected an upload or delete."""
    status_code = 500
    default_message = "Upload Failed"

def error_body(message: str) -> dict:
    return {"success": False, "error": message}

def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} for {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path", "form"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg", "Invalid request"))
        return JSONResponse(status_code=400, content=error_body(message))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body("An internal server error occurred."),
        )
