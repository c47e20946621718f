"""Read-only endpoints publishing the oils and fats ranking."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from fat_method.domain.fats import ProductEntry, Usage
from fat_method.domain.reference_data import (
    CRITERIA_DOCUMENTATION,
    FAQ,
    MENTION_METHODE,
    OILS_TO_AVOID,
    is_vegan,
)
from fat_method.services.scorecards import DETAIL_BY_USAGE, WEIGHTINGS_BY_USAGE

router = APIRouter(prefix="/fat", tags=["fat"])


def _entry_payload(entry: ProductEntry) -> dict[str, object]:
    return {**asdict(entry), "vegan": is_vegan(entry.name)}


@router.get("/method")
async def method() -> dict[str, object]:
    """Return weightings, criteria scales, oils to avoid and the FAQ."""
    return {
        "mention": MENTION_METHODE,
        "weightings": {
            usage.value: [asdict(row) for row in rows]
            for usage, rows in WEIGHTINGS_BY_USAGE.items()
        },
        "criteria": [asdict(doc) for doc in CRITERIA_DOCUMENTATION],
        "oils_to_avoid": list(OILS_TO_AVOID),
        "faq": [asdict(item) for item in FAQ],
    }


@router.get("/{usage}")
async def usage_detail(usage: str) -> dict[str, object]:
    """Return the ranked scorecards of one usage (cru, douce or haute)."""
    try:
        resolved = Usage(usage)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    return {
        "usage": resolved.value,
        "oils": [_entry_payload(entry) for entry in DETAIL_BY_USAGE[resolved]],
    }
