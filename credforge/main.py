"""Main application entry point for the FastAPI application.

Run with ``uvicorn credforge.main:app`` or ``python -m credforge.main``.
"""

import uvicorn

from credforge.core.application import create_application
from credforge.core.config.settings import settings

# Create the FastAPI application
app = create_application()


if __name__ == "__main__":
    uvicorn.run(
        "credforge.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
