"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["kakao", "google", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with no subclasses is concrete and always used as-is.
    A mockable component declares ``__mock_component__`` on a base class
    and has exactly one production and one mock subclass, told apart by
    ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Select the implementation class of this provider.

        Mock subclasses register themselves on import, so test code must
        import them before calling this with ``use_mock=True``.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_mockable():
            return cls

        impl = next(
            (c for c in cls.__subclasses__() if c.__is_mock__ == use_mock), None
        )
        if impl is None:
            kind = "mock" if use_mock else "production"
            raise ValueError(
                f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
            )
        return impl
