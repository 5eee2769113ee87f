"""API response models."""

from shop_api.models.health import HealthCheckResponse

__all__ = ["HealthCheckResponse"]
