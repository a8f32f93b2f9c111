#!/usr/bin/env python3
"""
One-off import of the seed roster and best games into Supabase.
Run: python scripts/seed_content.py seed.json [--dry-run]

seed.json: {"members": [...], "games": [...]} using the site's camelCase keys
(joinDate, imageUrl, replayUrl, descriptionIt, descriptionEn).
"""

import asyncio
import json
import sys
import os

# Add parent dir to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load env
from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError

from core.domain.models import MemberCreate, BestGameCreate
from infrastructure.database import SupabaseMemberRepository, SupabaseBestGameRepository

# camelCase seed keys -> table columns
MEMBER_KEYS = {"joinDate": "join_date"}
GAME_KEYS = {
    "imageUrl": "image_url",
    "replayUrl": "replay_url",
    "descriptionIt": "description_it",
    "descriptionEn": "description_en",
}


def to_columns(row: dict, mapping: dict) -> dict:
    """Rename known camelCase keys; drop the seed's local ids"""
    return {mapping.get(k, k): v for k, v in row.items() if k != "id"}


def parse_seed(seed: dict):
    members, games, errors = [], [], []
    for i, row in enumerate(seed.get("members", [])):
        try:
            members.append(MemberCreate.model_validate(to_columns(row, MEMBER_KEYS)))
        except ValidationError as e:
            errors.append(f"members[{i}]: {e.error_count()} invalid fields")
    for i, row in enumerate(seed.get("games", [])):
        try:
            games.append(BestGameCreate.model_validate(to_columns(row, GAME_KEYS)))
        except ValidationError as e:
            errors.append(f"games[{i}]: {e.error_count()} invalid fields")
    return members, games, errors


async def seed_content(path: str, dry_run: bool = False):
    with open(path, encoding="utf-8") as f:
        seed = json.load(f)

    members, games, errors = parse_seed(seed)
    for error in errors:
        print(f"  SKIP {error}")
    print(f"Parsed {len(members)} members, {len(games)} best games")

    if dry_run:
        print("Dry run, nothing written")
        return

    if members:
        created = await SupabaseMemberRepository().insert_many(members)
        print(f"  OK {len(created)} members")
    if games:
        created = await SupabaseBestGameRepository().insert_many(games)
        print(f"  OK {len(created)} best games")

    print("\nDone")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/seed_content.py <seed.json> [--dry-run]")
        sys.exit(1)

    asyncio.run(seed_content(sys.argv[1], dry_run="--dry-run" in sys.argv[2:]))
