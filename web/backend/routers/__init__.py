"""API route handlers."""

from .scoring import router as scoring_router
from .instances import router as instances_router
