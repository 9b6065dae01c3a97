#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.ffetch import HTTPClient, ffetch


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Follow index entries to their HTML documents")
    p.add_argument("url", nargs="?", default="https://www.aem.live/docpages-index.json")
    p.add_argument("limit", nargs="?", type=int, default=5)
    p.add_argument("--field", default="path")
    p.add_argument("--concurrency", type=int, default=5)
    p.add_argument("--allow", action="append", default=[], help="Additional host to follow")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with HTTPClient() as client:
        pipeline = ffetch(args.url).with_http_client(client).max_concurrency(args.concurrency)
        if args.allow:
            pipeline = pipeline.allow(args.allow)

        headings = (
            pipeline.follow(args.field, "document")
            .limit(args.limit)
            .map(
                lambda e: (
                    str(e.get(args.field, "")),
                    e["document"].h1.get_text(strip=True)
                    if e["document"] is not None and e["document"].h1
                    else e.get("document_error", "-"),
                )
            )
        )

        async for path, heading in headings:
            print(f"{path:40} | {heading}")


if __name__ == "__main__":
    asyncio.run(main())
