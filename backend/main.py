import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from socialhub.core.config import Settings, settings as default_settings  # noqa: E402
from socialhub.core.error_handlers import register_error_handlers  # noqa: E402
from socialhub.core.responses import UnicodeJSONResponse  # noqa: E402
from socialhub.db.session import Database  # noqa: E402
from socialhub.routes import (  # noqa: E402
    auth,
    comments,
    friends,
    likes,
    messages,
    notifications,
    posts,
    users,
)
from socialhub.utils.logger import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API. A database handed in by the caller is used as is and left open on shutdown."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        owns_database = app.state.database is None
        if owns_database:
            app.state.database = Database(
                settings.DATABASE_URL,
                pool_size=settings.DATABASE_POOL_SIZE,
                max_overflow=settings.DATABASE_MAX_OVERFLOW,
            )
        if settings.AUTO_CREATE_TABLES:
            app.state.database.create_all()
        logger.info("Social API started")
        yield
        logger.info("Social API shutting down")
        if owns_database:
            app.state.database.dispose()
            app.state.database = None

    app = FastAPI(
        title="Social API",
        description="Social network API: profiles, posts, comments, likes, friends, messages and notifications",
        version="1.0.0",
        openapi_tags=[
            {"name": "Authentication", "description": "User authentication endpoints"},
            {"name": "Users", "description": "User profile endpoints"},
            {"name": "Posts", "description": "Post endpoints"},
            {"name": "Comments", "description": "Comment endpoints"},
            {"name": "Likes", "description": "Like toggle endpoints"},
            {"name": "Friends", "description": "Friend management endpoints"},
            {"name": "Messages", "description": "Direct message endpoints"},
            {"name": "Notifications", "description": "Notification endpoints"},
        ],
        # Configure default JSON response class to preserve Unicode
        default_response_class=UnicodeJSONResponse,
        lifespan=lifespan,
    )
    app.state.database = database

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every API request with its status and duration"""
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                "client": request.client.host if request.client else None,
            },
        )
        return response

    # Configure CORS - MUST be added before routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    register_error_handlers(app, settings.CORS_ORIGINS)

    # Include routers; every group except auth resolves the caller per handler
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(posts.router, prefix="/api/posts", tags=["Posts"])
    app.include_router(comments.router, prefix="/api/comments", tags=["Comments"])
    app.include_router(likes.router, prefix="/api/likes", tags=["Likes"])
    app.include_router(friends.router, prefix="/api/friends", tags=["Friends"])
    app.include_router(messages.router, prefix="/api/messages", tags=["Messages"])
    app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])

    @app.get("/api/health")
    def health_check(request: Request):
        if not request.app.state.database.health_check():
            return UnicodeJSONResponse(status_code=503, content={"status": "unhealthy"})
        return {"status": "healthy"}

    return app


app = create_app()

# Run uvicorn server when file is executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
