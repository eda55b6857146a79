#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from tanuki.api.core import ClientConfig
from tanuki.api.endpoints import ProjectMembers
from tanuki.api.runtime.rest import AsyncHTTPClient, Pagination, paged


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List the members of a project page by page")
    p.add_argument("project", nargs="?", default="gitlab-org/gitlab-runner")
    p.add_argument("limit", nargs="?", type=int, default=25)
    p.add_argument("--all", action="store_true", help="Include inherited members")
    p.add_argument("--host", default=os.environ.get("TANUKI_HOST", "gitlab.com"))
    p.add_argument("--token", default=os.environ.get("TANUKI_TOKEN"))
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    config = ClientConfig(host=args.host, token=args.token)

    endpoint = ProjectMembers.builder().project(args.project).all_members(args.all).build()
    async with AsyncHTTPClient(config) as client:
        print(f"{'Username':25} | {'Access':12} | Expires")
        print("-" * 55)
        async for member in paged(endpoint, Pagination.with_limit(args.limit)).aiter(client):
            expires = member.expires_at.isoformat() if member.expires_at else "-"
            print(f"{member.username:25} | {member.access_level.as_str():12} | {expires}")


if __name__ == "__main__":
    asyncio.run(main())
