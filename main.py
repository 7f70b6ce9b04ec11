from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from config import Settings, settings as default_settings
from database.connection import get_database
from repositories.user_repository import UserRepository
from shared.exceptions import AppError, ValidationError
from auth.controllers import CredentialService
from auth.routes import router as auth_router
from contact.mailer import BrevoMailer
from contact.service import ContactNotifier
from contact.routes import router as contact_router

# =====================================================
# * Global logging configuration
# =====================================================
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger("main")

CONTACT_PATH = "/send-contact-email"


# =====================================================
# * Startup: unique email index
# =====================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        app.state.user_repository.ensure_indexes()
    except Exception:
        logger.exception("❌ Could not ensure MongoDB indexes at startup")
    yield


# =====================================================
# * Error handlers
# =====================================================
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    if request.url.path == CONTACT_PATH:
        error = ValidationError(body_key="error")
    else:
        errors = exc.errors()
        if any(e.get("type") == "json_invalid" for e in errors):
            error = ValidationError("Malformed request body", body_key="msg")
        else:
            # loc is ("body", <field>); positions inside the JSON are ints
            fields = sorted({
                e["loc"][-1] for e in errors
                if e.get("loc") and e["loc"][0] == "body" and isinstance(e["loc"][-1], str)
            })
            detail = ", ".join(f for f in fields if f != "body") or "request body"
            error = ValidationError(f"Invalid or missing fields: {detail}", body_key="msg")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# =====================================================
# * Application factory
# =====================================================
def create_app(settings: Settings = None, database=None, mailer=None) -> FastAPI:
    """Wires services from explicit dependencies; defaults come from the environment."""
    settings = settings or default_settings
    if database is None:
        database = get_database(settings)
    if mailer is None:
        mailer = BrevoMailer.from_settings(settings)

    if not settings.JWT_SECRET:
        logger.warning("⚠️ JWT_SECRET is not set; register/login will fail until it is configured.")

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} Backend",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    users = UserRepository.from_database(database)
    app.state.settings = settings
    app.state.user_repository = users
    app.state.credential_service = CredentialService(users, settings)
    app.state.contact_notifier = ContactNotifier(mailer, settings)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # =====================================================
    # * Routes
    # =====================================================
    app.include_router(auth_router, prefix="/api", tags=["Auth"])
    app.include_router(auth_router, prefix="/api/auth", tags=["Auth"], include_in_schema=False)
    app.include_router(contact_router, tags=["Contact"])

    @app.get("/", summary="Backend root")
    def root():
        return {
            "message": f"🚀 {settings.PROJECT_NAME} Backend running",
            "version": settings.VERSION,
            "env": settings.ENV,
        }

    logger.info(f"🌍 {settings.PROJECT_NAME} backend initialised in '{settings.ENV}' mode.")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=default_settings.PORT, reload=default_settings.DEBUG)
