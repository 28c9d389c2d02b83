"""Custom middleware."""

from .CorsPreflightMiddleware import CorsPreflightMiddleware
from .RequestPipeline import RequestPipeline, Stage

__all__ = [
    "CorsPreflightMiddleware",
    "RequestPipeline",
    "Stage",
]
