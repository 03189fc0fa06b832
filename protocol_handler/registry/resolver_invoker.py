import inspect
import time

from protocol_handler.logging import get_logger
from protocol_handler.types import Resolution

from .registered_protocol import RegisteredProtocol

logger = get_logger("resolver")


async def invoke_resolver(
    protocol: RegisteredProtocol,
    url: str,
) -> Resolution:
    start_time = time.perf_counter()

    try:
        result = protocol.resolver.resolve(url)

        if inspect.isawaitable(result):
            result = await result

    except Exception as e:
        elapsed_ms = _calculate_elapsed_ms(start_time)
        logger.error(
            f"Resolver for {protocol.scheme} raised after "
            f"{elapsed_ms:.1f}ms: {e!r}"
        )
        raise

    resolution = _build_resolution(result, protocol, url)
    logger.url_resolved(
        resolution, _calculate_elapsed_ms(start_time)
    )
    return resolution


def _calculate_elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


def _build_resolution(
    result: object,
    protocol: RegisteredProtocol,
    url: str,
) -> Resolution:
    if result is None or result == "":
        return Resolution.declined(url, protocol.scheme)

    if not isinstance(result, str):
        logger.warning(
            f"Resolver for {protocol.scheme} returned non-string: "
            f"{type(result).__name__}"
        )
        return Resolution.declined(url, protocol.scheme)

    return Resolution.resolved(url, protocol.scheme, result)
