from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS, DEBUG
from .database import create_tables
from .logger import get_logger, set_request_id, setup_logging
from .routers import auth, tasks

setup_logging(debug=DEBUG)
logger = get_logger("taskflow.main")

# Create FastAPI app
app = FastAPI(
    title="TaskFlow API",
    description="Personal task management API with JWT authentication",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Tag every log line of a request with the same request id."""
    request_id = set_request_id(request.headers.get("X-Request-ID"))
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing fields are a client error: answer 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Log persistence failures and hide their details from the client."""
    logger.error(
        "database_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(tasks.router, prefix="/api/tareas", tags=["tasks"])


# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_tables()
    logger.info("taskflow_started", cors_origins=CORS_ORIGINS)


@app.get("/")
def read_root():
    return {"message": "TaskFlow API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
