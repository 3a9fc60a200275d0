from grid_gateway.services.availability_service import fetch_availability

__all__ = ["fetch_availability"]
