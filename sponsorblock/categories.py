"""Segment categories and action types, and their API names."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import UnknownValueError
from .util import to_url_array_conditional_convert


class Category(enum.Enum):
    """A video segment category; the value is its API name."""

    SPONSOR = "sponsor"
    UNPAID_SELF_PROMOTION = "selfpromo"
    INTERACTION_REMINDER = "interaction"
    HIGHLIGHT = "poi_highlight"
    INTERMISSION_INTRO_ANIMATION = "intro"
    ENDCARDS_CREDITS = "outro"
    PREVIEW_RECAP = "preview"
    NON_MUSIC = "music_offtopic"
    FILLER_TANGENT = "filler"
    EXCLUSIVE_ACCESS = "exclusive_access"


class AcceptedCategories(enum.Flag):
    """The set of categories to request."""

    NONE = 0
    SPONSOR = 0b0000_0000_0001
    UNPAID_SELF_PROMOTION = 0b0000_0000_0010
    INTERACTION_REMINDER = 0b0000_0000_0100
    HIGHLIGHT = 0b0000_0000_1000
    INTERMISSION_INTRO_ANIMATION = 0b0000_0001_0000
    ENDCARDS_CREDITS = 0b0000_0010_0000
    PREVIEW_RECAP = 0b0000_0100_0000
    NON_MUSIC = 0b0000_1000_0000
    FILLER_TANGENT = 0b0001_0000_0000
    EXCLUSIVE_ACCESS = 0b0010_0000_0000
    ALL = 0b0011_1111_1111


class ActionKind(enum.Enum):
    """The kind of action recommended for a segment; the value is its API name."""

    SKIP = "skip"
    MUTE = "mute"
    POINT_OF_INTEREST = "poi"
    FULL_VIDEO = "full"

    def to_action(self, time_points: tuple[float, float]) -> Action:
        """Build the action of this kind from a ``(start, end)`` pair."""
        start, end = time_points
        if self in (ActionKind.SKIP, ActionKind.MUTE):
            return Action(self, start, end)
        if self is ActionKind.POINT_OF_INTEREST:
            return Action(self, start)
        return Action(self)


@dataclass(frozen=True)
class Action:
    """The action to take on a segment, with its time information.

    Skip and mute carry a start and an end, a point of interest carries only
    its time in ``start``, and a full-video label carries neither.
    """

    kind: ActionKind
    start: float | None = None
    end: float | None = None

    def __post_init__(self) -> None:
        if self.kind in (ActionKind.SKIP, ActionKind.MUTE):
            if self.start is None or self.end is None:
                raise ValueError(f"{self.kind.name} action needs a start and an end")
        elif self.kind is ActionKind.POINT_OF_INTEREST:
            if self.start is None or self.end is not None:
                raise ValueError("point of interest action needs a start and no end")
        elif self.start is not None or self.end is not None:
            raise ValueError("full video action carries no time information")


class AcceptedActions(enum.Flag):
    """The set of action types to request."""

    NONE = 0
    SKIP = 0b0001
    MUTE = 0b0010
    POINT_OF_INTEREST = 0b0100
    FULL_VIDEO = 0b1000
    ALL = 0b1111


_CATEGORY_PAIRS: tuple[tuple[AcceptedCategories, Category], ...] = (
    (AcceptedCategories.SPONSOR, Category.SPONSOR),
    (AcceptedCategories.UNPAID_SELF_PROMOTION, Category.UNPAID_SELF_PROMOTION),
    (AcceptedCategories.INTERACTION_REMINDER, Category.INTERACTION_REMINDER),
    (AcceptedCategories.HIGHLIGHT, Category.HIGHLIGHT),
    (AcceptedCategories.INTERMISSION_INTRO_ANIMATION, Category.INTERMISSION_INTRO_ANIMATION),
    (AcceptedCategories.ENDCARDS_CREDITS, Category.ENDCARDS_CREDITS),
    (AcceptedCategories.PREVIEW_RECAP, Category.PREVIEW_RECAP),
    (AcceptedCategories.NON_MUSIC, Category.NON_MUSIC),
    (AcceptedCategories.FILLER_TANGENT, Category.FILLER_TANGENT),
    (AcceptedCategories.EXCLUSIVE_ACCESS, Category.EXCLUSIVE_ACCESS),
)

_ACTION_PAIRS: tuple[tuple[AcceptedActions, ActionKind], ...] = (
    (AcceptedActions.SKIP, ActionKind.SKIP),
    (AcceptedActions.MUTE, ActionKind.MUTE),
    (AcceptedActions.POINT_OF_INTEREST, ActionKind.POINT_OF_INTEREST),
    (AcceptedActions.FULL_VIDEO, ActionKind.FULL_VIDEO),
)


def convert_to_category(name: str) -> Category:
    """Return the category with the given API name."""
    try:
        return Category(name)
    except ValueError:
        raise UnknownValueError("category", str(name)) from None


def convert_to_action_kind(name: str) -> ActionKind:
    """Return the action kind with the given API name."""
    try:
        return ActionKind(name)
    except ValueError:
        raise UnknownValueError("actionType", str(name)) from None


def categories_to_url(accepted: AcceptedCategories) -> str:
    """Format the accepted categories as an API query array."""
    return to_url_array_conditional_convert(
        _CATEGORY_PAIRS,
        lambda pair: pair[0] in accepted,
        lambda pair: pair[1].value,
    )


def actions_to_url(accepted: AcceptedActions) -> str:
    """Format the accepted action types as an API query array."""
    return to_url_array_conditional_convert(
        _ACTION_PAIRS,
        lambda pair: pair[0] in accepted,
        lambda pair: pair[1].value,
    )