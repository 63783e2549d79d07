# Middleware that await the downstream call and enrich the response (or the
# error) on its way back to the caller
from fetchware.core.exceptions import RequestFailedError, ResponseParseError
from fetchware.models import RequestOptions, Response
from fetchware.middleware.pipeline import (
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewareType,
)


@MiddlewareFactory.register(MiddlewareType.PARSE_TEXT)
class ParseTextMiddleware(Middleware):
    """Reads the response text and stores it on response.text_string."""

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        response = await next_call(url, options)
        response.text_string = await response.text()
        return response


@MiddlewareFactory.register(MiddlewareType.PARSE_JSON)
class ParseJSONMiddleware(Middleware):
    """
    Parses the response JSON and stores it on response.json_data.
    A payload that fails to parse raises ResponseParseError with the
    original error chained as its cause.
    """

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        response = await next_call(url, options)

        try:
            json_data = await response.json()
        except Exception as exc:
            raise ResponseParseError(f"Error parsing JSON: {type(exc).__name__}: {exc}") from exc

        response.json_data = json_data
        return response


@MiddlewareFactory.register(MiddlewareType.REQUEST_INFO)
class RequestInfoMiddleware(Middleware):
    """
    Adds request_url and request_options to the response, or to the
    exception when the downstream call fails. Mainly useful in testing and
    debugging. An exception that does not accept new attributes is replaced
    by a RequestFailedError carrying both fields, chained to the original.
    """

    async def __call__(self, next_call: NEXT_CALL, url: str, options: RequestOptions) -> Response:
        try:
            response = await next_call(url, options)
        except Exception as exc:
            try:
                exc.request_url = url
                exc.request_options = options
            except AttributeError:
                raise RequestFailedError(
                    f"Request to {url} failed: {type(exc).__name__}: {exc}",
                    request_url=url,
                    request_options=options,
                ) from exc
            raise

        response.request_url = url
        response.request_options = options
        return response


def parse_text() -> ParseTextMiddleware:
    return ParseTextMiddleware()


def parse_json() -> ParseJSONMiddleware:
    return ParseJSONMiddleware()


def request_info() -> RequestInfoMiddleware:
    return RequestInfoMiddleware()
