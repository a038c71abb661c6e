"""Fixed tag catalog.

Tasks may carry tag ids that are not in the catalog (older data, removed
tags). Those ids stay on the task; anything that needs label or colour
simply skips them.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class TagInfo(BaseModel):
    """Catalog entry for a tag."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    color: str


TAG_CATALOG: Tuple[TagInfo, ...] = (
    TagInfo(id="work", label="Work", color="bg-blue-100 text-blue-800"),
    TagInfo(id="personal", label="Personal", color="bg-green-100 text-green-800"),
    TagInfo(id="urgent", label="Urgent", color="bg-red-100 text-red-800"),
    TagInfo(id="shopping", label="Shopping", color="bg-purple-100 text-purple-800"),
    TagInfo(id="health", label="Health", color="bg-orange-100 text-orange-800"),
    TagInfo(id="finance", label="Finance", color="bg-yellow-100 text-yellow-800"),
)

_TAGS_BY_ID: Dict[str, TagInfo] = {tag.id: tag for tag in TAG_CATALOG}


def resolve_tag(tag_id: str) -> Optional[TagInfo]:
    """Look up a tag by id; None when the id is not in the catalog."""
    return _TAGS_BY_ID.get(tag_id)


def resolve_tags(tag_ids: Iterable[str]) -> List[TagInfo]:
    """Resolve tag ids in order, skipping unknown ids."""
    resolved = []
    for tag_id in tag_ids:
        info = resolve_tag(tag_id)
        if info is not None:
            resolved.append(info)
    return resolved
