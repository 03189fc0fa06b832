from aiohttp import web

from protocol_handler import __version__


async def handle_health(
    request: web.Request,
) -> web.Response:
    handler = request.app["handler"]

    return web.json_response(
        {
            "status": "healthy",
            "version": __version__,
            "protocols_registered": len(
                handler.protocols
            ),
        }
    )
