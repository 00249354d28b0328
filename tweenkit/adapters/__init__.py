"""
Target adapters.

Adapters translate scheduler writes into target-specific operations.
"""

from .protocol import (
    TransformChannel,
    format_number,
    VisualTarget,
    TargetAdapter,
    BaseTargetAdapter,
    GenericTargetAdapter,
    VisualTargetAdapter,
    adapt_target,
)
from .element import StyleElement

__all__ = [
    # Protocol
    "TransformChannel",
    "format_number",
    "VisualTarget",
    "TargetAdapter",
    "BaseTargetAdapter",
    "GenericTargetAdapter",
    "VisualTargetAdapter",
    "adapt_target",
    # In-memory element
    "StyleElement",
]
