"""Rule options for the shanten engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ShantenRules(BaseModel):
    """
    Options that change how the normal-form search scores a decomposition.

    cap_blocks: count at most four complete blocks, and at most as many
        partial blocks (besides the head) as are still missing. Without the
        cap the raw ``8 - 2 * block3 - block2`` score is used, which can
        under-report shanten for hands holding many partial blocks.
    """

    model_config = ConfigDict(frozen=True)

    cap_blocks: bool = True


DEFAULT_RULES = ShantenRules()
