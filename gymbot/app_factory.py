"""Entry point for uvicorn/gunicorn: `uvicorn gymbot.app_factory:app`."""
from gymbot.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
