"""
Main entrypoint for the Filmorate API.

This module assembles the FastAPI application: it sets up logging,
builds the in-memory stores and the services working on them, installs
the domain error handlers and includes the versioned routers.  The
``create_app`` function returns a fresh, empty application every time
it is called (tests rely on that); ``app`` is the instance served by
uvicorn, e.g.::

    uvicorn filmorate_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .api.errors import register_exception_handlers
from .core.config import settings
from .core.logging_config import setup_logging
from .services.film_service import FilmService
from .services.user_service import UserService
from .storage.film_storage import FilmStorage
from .storage.user_storage import UserStorage


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application with its own, empty user and film
        stores.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    user_storage = UserStorage()
    film_storage = FilmStorage()
    app.state.user_service = UserService(user_storage)
    app.state.film_service = FilmService(film_storage, user_storage)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
