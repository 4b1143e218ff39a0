"""Utility helpers shared across the project.

Submodules:
    logging          – JSON log formatter and execution-time decorator.
"""
