"""
Look up a kinopoisk.dev person and print template-ready JSON.

A numeric query is treated as a person id and printed as a normalized record; any other
query prints the ranked search candidates.

Run from repo root or apps/api (with KINOPOISK_API_TOKEN in apps/api/.env):
  python apps/api/scripts/person_lookup.py "Tom Hanks" --refine hanks
  or: cd apps/api && python scripts/person_lookup.py 9144 --folder People
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Ensure apps/api is on path so "person_notes" resolves without installing
_app_api = Path(__file__).resolve().parent.parent
if str(_app_api) not in sys.path:
    sys.path.insert(0, str(_app_api))

from person_notes.providers import KinopoiskServiceError, get_kinopoisk_provider
from person_notes.services import InvalidQueryError, is_numeric_id, person_service
from person_notes.services.formatting import PersonRecordError

logger = logging.getLogger(__name__)


async def run_lookup(query: str, refine: str, folder: str | None) -> dict:
    provider = get_kinopoisk_provider()
    if not is_numeric_id(query) and refine:
        found = await person_service.search(provider, query, refine)
        return found.model_dump(by_alias=True)
    result = await person_service.lookup(provider, query, folder)
    return result.model_dump(by_alias=True)


def main():
    parser = argparse.ArgumentParser(
        description="Search kinopoisk.dev persons or print a normalized person record."
    )
    parser.add_argument("query", help="Person name, or a numeric kinopoisk id")
    parser.add_argument("--refine", default="",
                        help="Rank candidates against this text (default: photos first)")
    parser.add_argument("--folder", default=None,
                        help="Notes folder used in related-person links (default from settings)")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    try:
        payload = asyncio.run(run_lookup(args.query, args.refine, args.folder))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(0)
    except (InvalidQueryError, KinopoiskServiceError, PersonRecordError) as e:
        logger.error("%s", e)
        sys.exit(1)
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
