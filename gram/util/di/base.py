"""Provider base class shared by every dishka provider in gram."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory fakes
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka Provider with swap metadata.

    A mockable component is a ProviderBase subclass that sets
    __mock_component__ and has exactly one production and one mock
    subclass, told apart by __is_mock__.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
