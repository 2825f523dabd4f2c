"""Base class for dishka providers.

Infrastructure that talks to the outside world (``mail``, ``persistence``)
is declared as a component base with one production and one mock
subclass. Everything else is a single concrete provider.
"""

from typing import ClassVar, Literal, Type, TypeVar

from dishka import Provider

Component = Literal["mail", "persistence"]

P = TypeVar("P", bound="ProviderBase")


class ProviderBase(Provider):
    """Provider with component metadata.

    Attributes:
        __mock_component__: Component name on mockable bases, else None
        __is_mock__: Set on the mock implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls: Type[P], use_mock: bool = False) -> Type[P]:
        """Pick the provider class to instantiate for this base.

        Concrete providers return themselves. Component bases return the
        subclass whose ``__is_mock__`` matches ``use_mock``; mock
        subclasses only exist once the test package has been imported.

        Raises:
            ValueError: If the requested implementation is not loaded
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
