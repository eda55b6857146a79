#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys

from tanuki.api.core import ClientConfig, TanukiError
from tanuki.api.endpoints import FileRaw
from tanuki.api.runtime.rest import HTTPClient, raw


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print a raw repository file")
    p.add_argument("project")
    p.add_argument("file_path")
    p.add_argument("--ref")
    p.add_argument("--lfs", action="store_true")
    p.add_argument("--host", default=os.environ.get("TANUKI_HOST", "gitlab.com"))
    p.add_argument("--token", default=os.environ.get("TANUKI_TOKEN"))
    return p.parse_args()


def main() -> int:
    args = parse_args()
    config = ClientConfig(host=args.host, token=args.token)
    endpoint = (
        FileRaw.builder()
        .project(args.project)
        .file_path(args.file_path)
        .ref(args.ref)
        .lfs(args.lfs or None)
        .build()
    )

    with HTTPClient(config) as client:
        try:
            content = raw(endpoint).query(client)
        except TanukiError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    sys.stdout.buffer.write(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
