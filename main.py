from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_cors_origins, get_log_format, get_log_level
from app.core.logging import get_logger, setup_logging
from app.db.session import engine, Base
from app.models import Property  # noqa: F401
from app.api.properties import router as properties_router

setup_logging(get_log_level(), get_log_format())
logger = get_logger(__name__)

app = FastAPI(title="Property Catalog API")

# Any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed input (bad JSON, non-numeric params, non-integer ids) is a 400, not FastAPI's 422."""
    logger.info("Rejected malformed request %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"detail": "Invalid request"})


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Property tables ready")


app.include_router(properties_router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
