"""
Exception handlers mapping receipt errors to HTTP responses.

Validation problems are 400, unknown ids 404 and receipts whose amounts, dates
or times cannot be parsed for scoring 422.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from common.points_engine.errors import (
    ReceiptNotFoundError,
    ReceiptParseError,
    ReceiptValidationError,
)


def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable or missing bodies are reported like any other invalid receipt.
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Invalid JSON",
            "errors": [
                {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg", "")}
                for err in exc.errors()
            ],
        },
    )


def receipt_validation_exception_handler(request: Request, exc: ReceiptValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Missing required fields", "errors": exc.problems},
    )


def receipt_not_found_exception_handler(request: Request, exc: ReceiptNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Receipt not found"})


def receipt_parse_exception_handler(request: Request, exc: ReceiptParseError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "field": exc.field, "value": exc.value},
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(ReceiptValidationError, receipt_validation_exception_handler)
    app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_exception_handler)
    app.add_exception_handler(ReceiptParseError, receipt_parse_exception_handler)
