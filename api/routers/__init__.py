"""API sub-routers package.

Currently exposes the `report` router with the analysis endpoints. Additional
routers can be added here and re-exported for inclusion in the FastAPI `app`.
"""

from .report import router  # noqa: F401

__all__ = [
    "router",
]
