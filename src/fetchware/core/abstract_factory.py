from typing import Generic, Callable, TypeVar, Hashable, ClassVar


K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
TypeMap = dict[K, Callable[..., T]]


class TypeAbstractFactory(Generic[K, T]):
    """
    Generic abstract factory that maps keys to constructors. A constructor
    is either a concrete class or a plain factory function returning T.
    """

    _registry: ClassVar[TypeMap] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def register(cls, key: K) -> Callable[[Callable[..., T]], Callable[..., T]]:
        """
        Decorator for registering a constructor under the given key.
        """
        def wrapper(impl: Callable[..., T]) -> Callable[..., T]:
            cls._registry[key] = impl
            return impl

        return wrapper

    @classmethod
    def list_keys(cls) -> list[K]:
        return list(cls._registry.keys())

    @classmethod
    def create(cls, key: K, *args, **kwargs) -> T:
        if key not in cls._registry:
            raise KeyError(f"{cls.__name__} has no constructor registered for {key!r}")
        return cls._registry[key](*args, **kwargs)
