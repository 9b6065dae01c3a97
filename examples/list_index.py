#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.ffetch import HTTPClient, ffetch


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List entries of a paginated content index")
    p.add_argument("url", nargs="?", default="https://www.aem.live/docpages-index.json")
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("--chunks", type=int, default=255)
    p.add_argument("--sheet", default=None)
    p.add_argument("--reload", action="store_true", help="Bypass cached responses")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with HTTPClient() as client:
        pipeline = (
            ffetch(args.url)
            .with_http_client(client)
            .chunks(args.chunks)
            .with_cache_reload(args.reload)
        )
        if args.sheet:
            pipeline = pipeline.sheet(args.sheet)

        entries = await pipeline.limit(args.limit).all()

    print("=" * 65)
    print(f"Index   : {args.url}")
    print(f"Entries : {len(entries)}")
    print("=" * 65)
    for entry in entries:
        print(f"{str(entry.get('path', '')):40} | {str(entry.get('title', ''))[:22]}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
