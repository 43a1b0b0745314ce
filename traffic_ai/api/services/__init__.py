from .traffic_service import TrafficService

__all__ = ["TrafficService"]
