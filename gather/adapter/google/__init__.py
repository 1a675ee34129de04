"""Google OAuth adapter."""

from .client import GoogleGateway, MockGoogleGateway, RealGoogleGateway

__all__ = ["GoogleGateway", "RealGoogleGateway", "MockGoogleGateway"]
