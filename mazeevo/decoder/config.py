from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from mazeevo.phenome.room import OrientationRule


class GeneValidationPolicy(str, Enum):
    """What to do with a gene location outside ``[0, 1)``."""

    REJECT = "reject"  # raise DegenerateGeneError
    CLAMP = "clamp"  # clamp into the room interior


class DecoderConfig(BaseModel):
    """Configuration options controlling MazeDecoder behaviour."""

    scale_multiplier: int = Field(
        default=1, gt=0, description="Factor converting grid cells to output units"
    )
    validation_policy: GeneValidationPolicy = Field(
        default=GeneValidationPolicy.REJECT,
        description="Handling of gene locations outside [0, 1)",
    )
    orientation_rule: OrientationRule = Field(
        default=OrientationRule.WIDER_IS_HORIZONTAL,
        description="Wall orientation choice for non-square rooms",
    )
    model_config = ConfigDict(frozen=True)
