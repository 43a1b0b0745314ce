# traffic_ai/routes/__init__.py
from .traffic import create_traffic_blueprint

__all__ = ["create_traffic_blueprint"]
