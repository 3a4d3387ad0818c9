"""
Top‑level package for the Sample Orders API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn sample_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
