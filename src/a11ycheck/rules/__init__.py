"""
The rule catalogue.

Rules run in the order listed here; reports group findings by rule in the
same order, so changing it changes every report.
"""

from __future__ import annotations

from typing import Tuple

from a11ycheck.protocols import Rule

from .aria import AriaLabelRule, AriaRoleRule, MissingAccessibleNameRule
from .contrast import ContrastRule
from .forms import LabelAssociationRule, UnlabeledInputRule
from .images import AltTextRule
from .links import EmptyLinkRule, IframeTitleRule, NewTabLinkRule
from .structure import HeadingEmptyRule, HeadingOrderRule, LandmarkRule, MultipleH1Rule

CATALOGUE: Tuple[Rule, ...] = (
    AltTextRule(),
    AriaLabelRule(),
    MissingAccessibleNameRule(),
    ContrastRule(),
    AriaRoleRule(),
    LandmarkRule(),
    LabelAssociationRule(),
    UnlabeledInputRule(),
    EmptyLinkRule(),
    IframeTitleRule(),
    MultipleH1Rule(),
    HeadingOrderRule(),
    HeadingEmptyRule(),
    NewTabLinkRule(),
)

__all__ = [
    "CATALOGUE",
    "AltTextRule",
    "AriaLabelRule",
    "AriaRoleRule",
    "ContrastRule",
    "EmptyLinkRule",
    "HeadingEmptyRule",
    "HeadingOrderRule",
    "IframeTitleRule",
    "LabelAssociationRule",
    "LandmarkRule",
    "MissingAccessibleNameRule",
    "MultipleH1Rule",
    "NewTabLinkRule",
    "UnlabeledInputRule",
]
