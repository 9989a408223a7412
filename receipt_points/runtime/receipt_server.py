"""FastAPI server for submitting receipts and redeeming points."""

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from receipt_points.application.receipts.points import redeem_points, submit_receipt
from receipt_points.receipt.payload import PointsResponse, ReceiptIdResponse, ReceiptPayload
from receipt_points.runtime.logging import get_logger
from receipt_points.runtime.receipt_registry import ReceiptRegistry

logger = get_logger(__name__)

INVALID_RECEIPT_MESSAGE = "Invalid receipt format"
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID"


def get_registry(request: Request) -> ReceiptRegistry:
    """Dependency returning the registry owned by the running app."""
    return request.app.state.registry


async def invalid_receipt_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed payloads as 400 instead of FastAPI's default 422."""
    logger.info("Rejected malformed payload on %s: %d errors", request.url.path, len(exc.errors()))
    return JSONResponse({"detail": INVALID_RECEIPT_MESSAGE}, status_code=400)


def create_app(registry: ReceiptRegistry | None = None) -> FastAPI:
    """
    Build the HTTP app around a receipt registry.

    Args:
        registry: Registry to serve. A fresh, empty one is created if None.
    """
    app = FastAPI(title="Receipt Points")
    app.state.registry = registry if registry is not None else ReceiptRegistry()
    app.add_exception_handler(RequestValidationError, invalid_receipt_handler)

    @app.post("/receipts/process", response_model=ReceiptIdResponse)
    def process_receipt(
        payload: ReceiptPayload,
        registry: ReceiptRegistry = Depends(get_registry),
    ) -> ReceiptIdResponse:
        """Register a receipt and return its id."""
        submission = submit_receipt(registry, payload.to_receipt())
        return ReceiptIdResponse(id=submission.receipt_id)

    @app.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
    def get_points(
        receipt_id: str,
        registry: ReceiptRegistry = Depends(get_registry),
    ) -> PointsResponse:
        """Return the points earned by a registered receipt."""
        result = redeem_points(registry, receipt_id)
        if result.status == "not_found":
            raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND_MESSAGE)
        assert result.points is not None
        return PointsResponse(points=result.points)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from receipt_points.runtime.settings import load_settings

    settings = load_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
