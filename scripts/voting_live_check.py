"""Manual live check for the voting service.

Run from the repository root with:
  PYTHONPATH=src VOTING_BASE_URL=http://localhost:8000 \
  python scripts/voting_live_check.py

Optional environment variables:
  VOTING_API_URI
  VOTING_PRESENTER_PASSWORD  also prints admin stats and results
  VOTING_LISTEN_SECONDS      how long to print status snapshots (default 10)
  VOTING_DEBUG               enables debug logging
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from pyschoolportal import Client
from pyschoolportal.models import VotingStatus


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        print(f"Missing required environment variable: {name}", file=sys.stderr)
        raise SystemExit(2)
    return value


def _print_status(status: VotingStatus) -> None:
    ready = "open" if status.ready else "closed"
    voted = "yes" if status.has_voted else "no"
    print(f"Status: voting {ready} | voted: {voted}")


async def main() -> int:
    base_url = _require_env("VOTING_BASE_URL")
    api_uri = os.getenv("VOTING_API_URI")
    password = os.getenv("VOTING_PRESENTER_PASSWORD")
    listen_seconds = float(os.getenv("VOTING_LISTEN_SECONDS") or 10)

    try:
        async with Client(base_url=base_url, api_uri=api_uri) as client:
            voting = await client.get_voting()
            candidates = await voting.list_candidates()
            print(f"Candidates: {len(candidates)}")
            for candidate in candidates:
                print(f"- {candidate.id} | {candidate.name}")

            if password:
                await voting.login(password)
                stats = await voting.get_stats()
                print(f"Voted: {stats.voted} | Not voted: {stats.unvoted}")
                for result in await voting.get_results():
                    print(f"- {result.name}: {result.votes}")
                await voting.logout()

            async with await voting.subscribe_to_status(_print_status) as channel:
                print(f"Listening on {channel.url} for {listen_seconds:g}s")
                await asyncio.sleep(listen_seconds)
    except Exception as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if os.getenv("VOTING_DEBUG") else logging.WARNING)
    raise SystemExit(asyncio.run(main()))
