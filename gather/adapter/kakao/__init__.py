"""Kakao OAuth adapter."""

from .client import KakaoGateway, MockKakaoGateway, RealKakaoGateway

__all__ = ["KakaoGateway", "RealKakaoGateway", "MockKakaoGateway"]
