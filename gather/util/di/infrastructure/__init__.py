"""Infrastructure providers."""

# Import bases
from .google import GoogleProvider
from .kakao import KakaoProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .google import ProdGoogleProvider  # noqa: F401
from .kakao import ProdKakaoProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GoogleProvider",
    "KakaoProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdKakaoProvider",
    "ProdPersistenceProvider",
]
