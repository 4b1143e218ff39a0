"""Application wiring: logging, middleware and exception handlers."""
