"""
FastAPI routers grouped by domain (exercises, health).

Each module exposes an APIRouter that the application factory (app.py)
includes. Routers read their service from `app.state` instead of building it.
"""
