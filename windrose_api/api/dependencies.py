"""FastAPI dependencies for dependency injection."""
from windrose_api.config import settings
from windrose_api.services.rose_service import WindRoseService


def get_windrose_service() -> WindRoseService:
    """Get wind rose service instance."""
    return WindRoseService(
        default_center=(settings.default_center_x, settings.default_center_y),
        surface_size=(settings.surface_width, settings.surface_height),
    )
