from abc import ABC, abstractmethod
from typing import Any, Callable

from fetchware.config.models.fetch import FetchConfig
from fetchware.config.models.middleware import MiddlewareConfigModel
from fetchware.config.models.transport import TransportConfigModel
from fetchware.middleware.pipeline import (
    MIDDLEWARE_FUNC,
    NEXT_CALL,
    MiddlewareFactory,
    MiddlewareType,
    compose,
)
from fetchware.models import ComposedFetch
from fetchware.transport.base import Transport
from fetchware.transport.engine import TransportFactory


class RuntimeFactory(ABC):

    @staticmethod
    @abstractmethod
    def build_factory(cfg: Any, *args, **kwargs) -> Callable[[], Any]: ...


class TransportRuntimeFactory(RuntimeFactory):

    @staticmethod
    def build_factory(cfg: TransportConfigModel) -> Callable[[], Transport]:

        def factory() -> Transport:
            return TransportFactory.create(cfg.type, **cfg.to_runtime_args())

        return factory


class MiddlewareRuntimeFactory(RuntimeFactory):

    @staticmethod
    def build_factory(cfg: MiddlewareConfigModel) -> Callable[[], MIDDLEWARE_FUNC]:

        def factory() -> MIDDLEWARE_FUNC:
            return MiddlewareFactory.create(MiddlewareType(cfg.type), **cfg.to_runtime_args())

        return factory

    @staticmethod
    def get_factories(mw_cfgs: list[MiddlewareConfigModel]) -> list[Callable[[], MIDDLEWARE_FUNC]]:

        return [MiddlewareRuntimeFactory.build_factory(cfg) for cfg in mw_cfgs]


def build_fetch(config: FetchConfig, transport: NEXT_CALL | None = None) -> ComposedFetch:
    """
    Compose the middleware chain described by config. When no transport is
    given, one is built from config.transport; the caller owns its lifecycle
    through the `transport` attribute of the returned function.
    """
    if transport is None:
        transport = TransportRuntimeFactory.build_factory(config.transport)()

    middleware = [factory() for factory in MiddlewareRuntimeFactory.get_factories(config.middleware)]
    return compose(transport, *middleware)
