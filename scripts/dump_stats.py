"""Print the GitHub stats snapshot of the configured user as JSON.

Usage:
    python scripts/dump_stats.py [--repos name,owner/name] [--username login]
"""

import argparse
import asyncio
import json

from devfolio.core.cache import SnapshotCache
from devfolio.core.config import get_app_settings, warn_missing_github_config
from devfolio.core.exceptions import FetchError
from devfolio.core.stats import create_stats_aggregator


async def dump_stats(username: str | None, repos: str | None) -> int:
    settings = get_app_settings()
    warn_missing_github_config(settings)

    aggregator = create_stats_aggregator(
        settings, cache=SnapshotCache(ttl_seconds=settings.stats_cache_ttl_seconds)
    )
    username = username or settings.github_username

    try:
        if repos:
            names = [name.strip() for name in repos.split(",") if name.strip()]
            result = await aggregator.fetch_specific_repos(username, names)
            output = [repo.model_dump(by_alias=True) for repo in result]
        else:
            snapshot = await aggregator.fetch_github_stats(username)
            output = snapshot.model_dump(by_alias=True)
    except FetchError as e:
        print(f"Error: {e}")
        return 1
    finally:
        await aggregator.close()

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--username", default=None, help="GitHub login (defaults to GITHUB_USERNAME)")
    parser.add_argument("--repos", default=None, help="Comma separated repository names")
    args = parser.parse_args()
    return asyncio.run(dump_stats(args.username, args.repos))


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
