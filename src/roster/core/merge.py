"""Merge policy for partial player updates.

A PUT body is decoded into a pydantic model, which remembers which fields
the client actually sent (``model_fields_set``). The policy decides, field by
field and in data-model order, whether the incoming value replaces the stored
one:

- ``presence``: replace when the field was sent, whatever its value. A client
  can reset a field to ``""`` or ``0``.
- ``non_zero``: replace only when the value is non-zero for its type. Fields
  sent as ``""`` or ``0`` are ignored, so nothing can be reset to zero.

Under both rules a field the client did not send never changes, and the
Riot ID is never touched.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

MERGEABLE_FIELDS: tuple[str, ...] = (
    "irl_name",
    "team",
    "rank",
    "role",
    "main",
    "acs",
    "kdr",
    "damage_per_round",
    "hs",
)


class MergePolicy(str, Enum):
    """Rule deciding which patch fields overwrite a stored record."""

    PRESENCE = "presence"
    NON_ZERO = "non_zero"


def is_zero(value: Any) -> bool:
    """Check if a value is the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def select_updates(
    patch: BaseModel, policy: MergePolicy = MergePolicy.PRESENCE
) -> dict[str, Any]:
    """Pick the patch fields that should overwrite the stored record.

    Returns an insertion-ordered mapping of field name to new value, in
    MERGEABLE_FIELDS order.
    """
    sent = patch.model_fields_set
    updates: dict[str, Any] = {}
    for name in MERGEABLE_FIELDS:
        value = getattr(patch, name, None)
        if policy is MergePolicy.PRESENCE:
            if name in sent:
                updates[name] = value
        elif not is_zero(value):
            updates[name] = value
    return updates


def merge_into(
    existing: Any, patch: BaseModel, policy: MergePolicy = MergePolicy.PRESENCE
) -> list[str]:
    """Apply a patch to an existing record in place.

    Returns the names of the fields whose stored value actually changed.
    """
    changed: list[str] = []
    for name, value in select_updates(patch, policy).items():
        if getattr(existing, name) != value:
            setattr(existing, name, value)
            changed.append(name)
    logger.debug(f"Merged patch with policy={policy.value}: changed={changed}")
    return changed
