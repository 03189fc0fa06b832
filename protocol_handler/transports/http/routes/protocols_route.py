from aiohttp import web


async def handle_protocols(
    request: web.Request,
) -> web.Response:
    handler = request.app["handler"]

    return web.json_response(
        {
            "param": handler.param,
            "protocols": [
                {
                    "scheme": registered.scheme,
                    "resolver": registered.resolver.describe(),
                    "description": registered.description,
                }
                for registered in handler.registry
            ],
            "blacklist": sorted(handler.blacklist),
        }
    )
