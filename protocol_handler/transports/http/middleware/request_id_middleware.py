import uuid

from aiohttp import web
from aiohttp.web import middleware


@middleware
async def request_id_middleware(request: web.Request, handler):
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request["request_id"] = request_id

    try:
        response = await handler(request)
    except web.HTTPException as e:
        # redirects are raised, tag them too
        e.headers["X-Request-ID"] = request_id
        raise

    response.headers["X-Request-ID"] = request_id
    return response
