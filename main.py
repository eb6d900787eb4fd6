import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from app.api.endpoints import router
from app.shared.correlation import CorrelationMiddleware
from app.shared.constants import UPDATE_FAILURE_MESSAGE
from app.shared.errors import request_correlation_id, validation_error
from app.shared.logging_config import setup_logging

# Configure logging
setup_logging(service_name="office-docs")
logger = logging.getLogger("OfficeDocs.Main")

UPDATE_CONTENT_PATH = "/Document/UpdateDocumentContent"

app = FastAPI(
    title="Office Document Service",
    description="Upload, read, edit and download Word and PowerPoint documents",
    version="1.0.0"
)

app.add_middleware(CorrelationMiddleware)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request body for {request.url.path}")
    # The editor script reads {success, message} from this endpoint
    if request.url.path == UPDATE_CONTENT_PATH:
        return JSONResponse({"success": False, "message": UPDATE_FAILURE_MESSAGE})
    return validation_error(
        message="Invalid request",
        details={"errors": jsonable_errors(exc)},
        correlation_id=request_correlation_id(request),
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/Document/Index")


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe for the container platform."""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
