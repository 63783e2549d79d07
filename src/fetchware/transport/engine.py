import logging
from types import TracebackType
from typing_extensions import Self
from aiohttp import ClientSession, ClientTimeout, TCPConnector

from fetchware.transport.base import TransportType, Transport
from fetchware.config.models.transport import TcpConnectionConfig
from fetchware.core.abstract_factory import TypeAbstractFactory
from fetchware.core.exceptions import TransportClosedError
from fetchware.models import FetchResponse, RequestOptions


class TransportFactory(TypeAbstractFactory[TransportType, Transport]):
    pass


@TransportFactory.register(TransportType.AIOHTTP)
class AiohttpTransport(Transport):
    """
    Transport adapter that uses aiohttp.ClientSession to make HTTP requests.
    The response body is read inside the request context and returned as a
    FetchResponse. Connection errors and timeouts raised by aiohttp are not
    caught here.
    """

    def __init__(
        self,
        base_url: str = "",
        connector_config: TcpConnectionConfig | None = None,
        base_timeout: float = 30,
    ) -> None:
        self._base_url = base_url
        self._connector_config = connector_config or TcpConnectionConfig()
        self._timeout = ClientTimeout(total=base_timeout)
        self._session: ClientSession | None = None
        self._closed = False
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> ClientSession | None:
        return self._session

    def _build_tcp_connector(self, cfg: TcpConnectionConfig) -> TCPConnector:
        return TCPConnector(**cfg.model_dump())

    async def open(self) -> None:
        if self._session is not None and not self._session.closed:
            return

        self._session = ClientSession(
            connector=self._build_tcp_connector(self._connector_config),
            timeout=self._timeout,
        )
        self._closed = False
        self._logger.debug("Opened HTTP session")

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._logger.debug("Closed HTTP session")
        self._session = None
        self._closed = True

    async def __aenter__(self) -> Self:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def fetch(self, url: str, options: RequestOptions) -> FetchResponse:
        if self._closed:
            raise TransportClosedError(f"{self.__class__.__name__} has been closed")

        if self._session is None or self._session.closed:
            await self.open()

        async with self._session.request(
            options.method or "GET",
            self._base_url + url,
            headers=options.headers,
            data=options.body,
        ) as response:
            body = await response.read()
            return FetchResponse(
                status=response.status,
                headers=dict(response.headers),
                body=body,
                url=str(response.url),
                encoding=response.charset or "utf-8",
            )
