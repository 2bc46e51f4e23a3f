import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from posyandu.api.endpoints import classification
from posyandu.api.endpoints import screening
from posyandu.core.config import settings
from posyandu.core.errors import ValidationError
from posyandu.schemas.generic_response import GenericResponse

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    body = GenericResponse.error(422, exc.message, {"field": exc.field})
    return JSONResponse(status_code=422, content=body.model_dump())


# Include API routes
app.include_router(classification.router, prefix=f"{settings.API_V1_STR}/classification", tags=["classification"])
app.include_router(screening.router, prefix=f"{settings.API_V1_STR}/screening", tags=["screening"])

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())
