#!/usr/bin/env python3
"""
protocol-handler example

Registers two schemes, resolves one URL standalone, then serves the
handler over HTTP:

    python examples/resolvers.py
    protocol-handler serve examples/resolvers.py

    curl -i "localhost:3000/resolve?url=s3://test"            # 302 to example.com
    curl -i "localhost:3000/resolve?url=https://google.com"   # 302, passed through
    curl -i "localhost:3000/resolve?url=gdrive://test"        # 400 UnknownProtocol
"""

import asyncio
import os
import sys

sys.path.insert(
    0,
    os.path.dirname(
        os.path.dirname(os.path.abspath(__file__))
    ),
)

from protocol_handler import Resolver, create_handler


class BucketResolver(Resolver):
    """Maps ``bucket://<name>/<key>`` to a public object URL."""

    async def resolve(self, url: str) -> str | None:
        _, _, location = url.partition("://")
        bucket, _, key = location.partition("/")
        if not key:
            return None
        return f"https://{bucket}.storage.example.com/{key}"


handler = create_handler("url")
handler.protocol(
    "s3://", lambda url: "https://example.com"
).protocol(
    "bucket://", BucketResolver(), description="object storage"
)


async def main():
    url = await handler.resolve("s3://test")
    print(f"Resolved: s3://test to {url}")


if __name__ == "__main__":
    asyncio.run(main())
    handler.serve(port=3000)
