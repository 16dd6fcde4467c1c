import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.config import settings
from blog_api.database import create_tables, engine
from blog_api.exception_handlers import register_exception_handlers
from blog_api.middleware import RequestDiagnosticsMiddleware
from blog_api.routers import categories, comments, posts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
    logger.info("Blog API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Blog API",
    description="CRUD backend for posts, categories and comments",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestDiagnosticsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error mapping
register_exception_handlers(app)

# Routers
app.include_router(categories.router)
app.include_router(posts.router)
app.include_router(comments.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
