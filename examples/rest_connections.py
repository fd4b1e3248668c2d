#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from graphrest.http import AiohttpApi, HttpApiOptions


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a REST collection as a forward connection")
    p.add_argument("origin", help="Backend origin, e.g. https://api.example.com")
    p.add_argument("path", help="Collection path, e.g. /widgets")
    p.add_argument("--api-base", default="")
    p.add_argument("--first", type=int, default=10)
    p.add_argument("--after", default=None)
    p.add_argument("--paged", action="store_true", help="Backend paginates server-side")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    options = HttpApiOptions(origin=args.origin, api_base=args.api_base)
    async with AiohttpApi(options) as api:
        conn_args = {"first": args.first, "after": args.after}
        if args.paged:
            connection = await api.get_paginated_connection(args.path, conn_args)
        else:
            connection = await api.get_unpaginated_connection(args.path, conn_args)
    if connection is None:
        print("Not found")
        return
    print(json.dumps(connection.to_dict(), indent=2, default=str))


if __name__ == "__main__":
    asyncio.run(main())
