"""
FastAPI layer.

Exposes:
- `api.create_app` : application factory (`POST /`, `OPTIONS /`, `GET /health`)
- `main.app`       : ASGI app built from environment settings
"""
