"""API route modules."""

from poolside.api.routes.health import router as health_router
from poolside.api.routes.swim_times import router as swim_times_router
from poolside.api.routes.training_logs import athletes_router
from poolside.api.routes.training_logs import router as training_logs_router

__all__ = [
    "athletes_router",
    "health_router",
    "swim_times_router",
    "training_logs_router",
]
