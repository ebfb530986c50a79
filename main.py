"""
Distance API
============
Entry point. Run with: python main.py
(``uvicorn main:app`` also works but skips the startup line.)
"""

from src.api.app import create_app
from src.api.server import serve
from src.config import settings

app = create_app(settings)

if __name__ == "__main__":
    serve(settings)
