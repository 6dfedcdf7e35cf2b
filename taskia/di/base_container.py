# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with singletons and factories"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Union[Type, str], Callable[..., Any]] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[..., TypeVarType]) -> None:
        """Register a factory; every get() builds a new instance"""
        self.factories[interface] = factory

    def get(self, interface: Union[Type[TypeVarType], str], **kwargs: Any) -> TypeVarType:
        """
        Get an instance of the requested type or string key.

        Keyword arguments are forwarded to the factory, so collaborators
        such as a shared unit of work can be handed down.
        """
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface](**kwargs)

        raise ValueError(f"No registration found for {interface}")
