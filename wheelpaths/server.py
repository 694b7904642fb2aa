"""
FastAPI server for the drivetrain trajectory service.

Endpoints:
- GET /health: Liveness check
- POST /expand: Center trajectory -> per-wheel trajectories
- POST /charts/position, /charts/velocity: Chart series for the editor
- GET /units, POST /units/snap, POST /units/place: Unit system and point placement
"""

import logging

from fastapi import FastAPI

from .config import get_bind_address
from .routes import charts_router, expand_router, units_router

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Wheel Paths",
    description="Per-wheel trajectories for tank and swerve drivetrains",
    version="1.0.0"
)

app.include_router(expand_router)
app.include_router(charts_router)
app.include_router(units_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host, port = get_bind_address()
    logger.info("Serving on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
