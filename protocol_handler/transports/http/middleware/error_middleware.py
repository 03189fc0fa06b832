from aiohttp import web
from aiohttp.web import middleware

from protocol_handler.errors import ProtocolHandlerError


@middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except ProtocolHandlerError as e:
        return web.json_response(
            {"error": e.to_dict()}, status=400
        )
    except Exception as e:
        if "logger" in request.app:
            request.app["logger"].error(
                f"Unhandled error: {e}", exc_info=True
            )
        return web.json_response(
            {
                "error": {
                    "name": type(e).__name__,
                    "code": "ERR_INTERNAL",
                    "message": "Internal server error",
                },
                "detail": str(e),
            },
            status=500,
        )
