"""Type definitions for diff report models."""

from typing import Literal

DetailKind = Literal[
    "addition",
    "removal",
    "modification",
    "order_change",
]

DETAIL_KINDS: tuple[str, ...] = (
    "addition",
    "removal",
    "modification",
    "order_change",
)

ADDITION = "addition"
REMOVAL = "removal"
MODIFICATION = "modification"
ORDER_CHANGE = "order_change"
