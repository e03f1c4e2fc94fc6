from .base import BaseRule
from .braces import BracePlacementRule
from .line_length import LineLengthRule
from .naming import CaseRule
from .spacing import SpacingRule

__all__ = [
    "BaseRule",
    "BracePlacementRule",
    "CaseRule",
    "LineLengthRule",
    "SpacingRule",
]
