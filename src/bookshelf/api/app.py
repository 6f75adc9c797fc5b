"""
Main FastAPI application for the Bookshelf service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog.store import BookStore, build_book_store
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(store: BookStore | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Book store to serve. Built from ``catalog_path`` (or the seed
            catalog) when omitted.
        app_settings: Settings to use instead of the global instance
    """
    app_settings = app_settings or settings
    if store is None:
        store = build_book_store(app_settings.catalog_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Bookshelf API...", books=len(store))

        from ..validation import ValidationError, validate_startup_configuration

        try:
            validation_results = validate_startup_configuration(store, app_settings)
            if not validation_results["overall_valid"]:
                logger.error(
                    "Catalog validation failed - some books may not serve createdAt",
                    catalog_errors=validation_results["catalog"]["errors"],
                )
        except ValidationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error during startup validation",
                error=str(e),
                note="Application will continue but may have configuration issues",
            )

        yield

        logger.info("Shutting down Bookshelf API...")

    app = FastAPI(
        title="Bookshelf API",
        description="In-memory book catalog served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "books": len(store)}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=app_settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
