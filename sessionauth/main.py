import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sessionauth.config import Settings, settings as default_settings
from sessionauth.database import Database
from sessionauth.errors import AuthServiceError, ValidationError
from sessionauth.routers import auth, sessions, todos
from sessionauth.services.auth import AuthService
from sessionauth.services.passwords import PasswordVerifier
from sessionauth.services.sessions import SessionManager, SessionStore
from sessionauth.services.todos import TodoStore
from sessionauth.services.users import UserStore

LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)
    database = Database(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.open()
        LOGGER.info("Database opened")
        try:
            yield
        finally:
            await database.close()
            LOGGER.info("Database closed")

    app = FastAPI(title="Session Auth Todo Backend", lifespan=lifespan)

    user_store = UserStore(database)
    session_manager = SessionManager(
        SessionStore(database), user_store, token_bytes=settings.session_token_bytes
    )
    app.state.settings = settings
    app.state.database = database
    app.state.session_manager = session_manager
    app.state.auth_service = AuthService(
        user_store, PasswordVerifier(rounds=settings.bcrypt_rounds), session_manager
    )
    app.state.todo_store = TodoStore(database)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AuthServiceError)
    async def auth_service_error_handler(request: Request, exc: AuthServiceError):
        if exc.status_code >= 500:
            LOGGER.error(
                "%s %s failed", request.method, request.url.path, exc_info=exc
            )
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": AuthServiceError.default_message},
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies and path values are reported like any other invalid request.
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"detail": ValidationError.default_message},
        )

    app.include_router(auth.router)
    app.include_router(sessions.router)
    app.include_router(todos.router)

    @app.get("/")
    def root():
        return {"status": "Backend running"}

    return app


app = create_app()
