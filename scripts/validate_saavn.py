#!/usr/bin/env python3
"""
Saavn Proxy Validation Script

Checks the configured Saavn proxy hosts (SAAVN_API_BASE_URLS) end to end:
search, song lookup, suggestions, and artist lookup, and writes a JSON
report.
"""

import asyncio
import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import structlog
from dotenv import load_dotenv

from saavn_client import RateLimitedError, SaavnService, SongNotFoundError
from saavn_client.models import ClientConfig, Song
from saavn_client.utils.logging_config import log_error, setup_logging

# Load environment variables
load_dotenv()

logger = structlog.get_logger(__name__)


class SaavnValidator:
    """Validates that a Saavn proxy serves every endpoint the client uses."""

    def __init__(self, config: ClientConfig):
        self.config = config
        self.test_queries = [
            "believer",
            "arijit singh",
            "lofi",
            "coke studio",
        ]

    async def run_validation(self) -> Dict[str, Any]:
        """Run complete validation suite."""
        logger.info("Starting Saavn validation", base_urls=self.config.base_urls)

        async with SaavnService(config=self.config) as service:
            search_results = await self._test_search(service)
            song_results = await self._test_songs(service, search_results.pop("sample_song", None))

            client = await service.client_manager.get_saavn_client()
            failover = client.get_service_info()["failover"]

        logger.info("Saavn validation completed")
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "base_urls": self.config.base_urls,
            "search": search_results,
            "songs": song_results,
            "failover": failover,
        }

    async def _test_search(self, service: SaavnService) -> Dict[str, Any]:
        """Run song searches and record hit counts and latency."""
        per_query: Dict[str, Any] = {}
        sample_song = None

        for query in self.test_queries:
            start = time.time()
            try:
                response = await service.search_songs(query, limit=10)
                per_query[query] = {
                    "success": response.success,
                    "total": response.data.total,
                    "returned": len(response.data.results),
                    "duration_ms": int((time.time() - start) * 1000),
                }
                if sample_song is None and response.data.results:
                    sample_song = response.data.results[0]
            except RateLimitedError as e:
                log_error(e, {"query": query})
                per_query[query] = {"success": False, "error": str(e), "rate_limited": True}
            except Exception as e:
                log_error(e, {"query": query})
                per_query[query] = {"success": False, "error": str(e)}

        successes = sum(1 for r in per_query.values() if r.get("success"))
        return {
            "queries": per_query,
            "success_rate": successes / len(self.test_queries),
            "sample_song": sample_song,
        }

    async def _test_songs(self, service: SaavnService, song: Song) -> Dict[str, Any]:
        """Look up a found song, its suggestions, and its primary artist."""
        if song is None:
            return {"skipped": "no search results"}

        results: Dict[str, Any] = {"song_id": song.id}
        try:
            detail = await service.get_song(song.id)
            results["song_found"] = True
            results["has_download_url"] = detail.best_download_url() is not None

            suggestions: List[Song] = await service.get_suggestions(song.id)
            results["suggestions"] = len(suggestions)

            if detail.artists.primary:
                artist = await service.get_artist(detail.artists.primary[0].id)
                results["artist"] = artist.name
                artist_songs = await service.get_artist_songs(artist.id, limit=5)
                results["artist_songs"] = len(artist_songs.data.results)
        except SongNotFoundError:
            results["song_found"] = False
        except Exception as e:
            log_error(e, {"song_id": song.id})
            results["error"] = str(e)

        return results


async def main():
    """Main validation function."""
    setup_logging(log_dir="logs", log_level="INFO")

    config = ClientConfig.from_env()

    output_dir = Path("data/validation")
    output_dir.mkdir(parents=True, exist_ok=True)

    validator = SaavnValidator(config)

    try:
        results = await validator.run_validation()

        output_file = output_dir / f"saavn_validation_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        with open(output_file, 'w') as f:
            json.dump(results, f, indent=2)

        print("\n" + "=" * 60)
        print("SAAVN PROXY VALIDATION SUMMARY")
        print("=" * 60)
        print(f"Base URLs: {', '.join(config.base_urls)}")
        print(f"Search Success Rate: {results['search']['success_rate']:.1%}")
        print(f"Song Lookup: {results['songs']}")
        print(f"Failover: {results['failover']}")
        print(f"\nDetailed results saved to: {output_file}")
        print("=" * 60)

    except Exception as e:
        logger.error("Validation failed", error=str(e))
        print(f"ERROR: Validation failed - {e}")


if __name__ == "__main__":
    asyncio.run(main())
