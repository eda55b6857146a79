#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os

from tanuki.api.core import ClientConfig
from tanuki.api.endpoints import CurrentUser
from tanuki.api.runtime.rest import HTTPClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show the user owning an access token")
    p.add_argument("--host", default=os.environ.get("TANUKI_HOST", "gitlab.com"))
    p.add_argument("--token", default=os.environ.get("TANUKI_TOKEN"))
    return p.parse_args()


def main() -> None:
    args = parse_args()
    config = ClientConfig(host=args.host, token=args.token)

    with HTTPClient(config) as client:
        user = CurrentUser.builder().build().query(client)

    print("=" * 40)
    print(f"Username : {user.username}")
    print(f"Name     : {user.name}")
    print(f"State    : {user.state}")
    print(f"Admin    : {user.is_admin}")
    print("=" * 40)


if __name__ == "__main__":
    main()
