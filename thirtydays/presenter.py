"""
Card and list presentation logic, independent from Kivy widgets.

``CardPresenter`` turns one catalog entry plus its day into a
``RenderedCard``: every string already resolved, the toggle glyph chosen,
and the quote present only while the card is expanded. ``ListPresenter``
owns one card presenter per entry and hands out the entrance animation plan
exactly once.

Widgets only copy ``RenderedCard`` fields onto their properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from thirtydays.model import CardViewState, Motorcycle, day_for_position
from thirtydays.motion import CARD_SLIDE_IN, LIST_FADE_IN, SpringSpec
from thirtydays.resources import AssetResolver, StringResolver

DAY_TEMPLATE = 'day_template'
EXPAND_BUTTON_DESCRIPTION = 'expand_button_content_description'

ICON_EXPAND_MORE = 'expand_more'
ICON_EXPAND_LESS = 'expand_less'


@dataclass(frozen=True)
class RenderedCard:
    """Resolved content of one card, top to bottom."""

    day: int
    day_text: str
    toggle_icon: str
    toggle_description: str
    make_text: str
    image_source: str
    image_description: str
    quote_text: Optional[str]
    expanded: bool


class CardPresenter:
    """Renders a single card and owns its expand/collapse state."""

    def __init__(
        self,
        entry: Motorcycle,
        day: int,
        strings: StringResolver,
        assets: AssetResolver,
    ):
        if day < 1:
            raise ValueError(f'Day must be 1 or greater, got {day}')
        self.entry = entry
        self.day = day
        self.strings = strings
        self.assets = assets
        self.state = CardViewState()

    @property
    def expanded(self) -> bool:
        return self.state.expanded

    def toggle(self) -> RenderedCard:
        """Flip the expanded flag and return the new rendering."""
        self.state.toggle()
        return self.render()

    def render(self) -> RenderedCard:
        expanded = self.state.expanded
        make_text = self.strings.resolve(self.entry.make)

        return RenderedCard(
            day=self.day,
            day_text=self.strings.format(DAY_TEMPLATE, day=self.day),
            toggle_icon=ICON_EXPAND_LESS if expanded else ICON_EXPAND_MORE,
            toggle_description=self.strings.resolve(EXPAND_BUTTON_DESCRIPTION),
            make_text=make_text,
            image_source=self.assets.resolve(self.entry.image),
            image_description=make_text,
            quote_text=self.strings.resolve(self.entry.quote) if expanded else None,
            expanded=expanded,
        )


@dataclass(frozen=True)
class SlideIn:
    """Vertical slide of one card from ``offset_y`` below its resting place."""

    position: int
    offset_y: float
    spring: SpringSpec = CARD_SLIDE_IN


@dataclass(frozen=True)
class EntrancePlan:
    """What to animate when the list first appears."""

    fade: Optional[SpringSpec] = None
    slides: List[SlideIn] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.fade is None and not self.slides


class ListPresenter:
    """Renders an ordered catalog as cards with 1-based days."""

    def __init__(
        self,
        entries: Sequence[Motorcycle],
        strings: StringResolver,
        assets: AssetResolver,
    ):
        self.entries = tuple(entries)
        self.strings = strings
        self.assets = assets
        self.cards = [
            CardPresenter(entry, day_for_position(position), strings, assets)
            for position, entry in enumerate(self.entries)
        ]
        self.entrance_played = False

    def __len__(self):
        return len(self.cards)

    def card(self, position: int) -> CardPresenter:
        return self.cards[position]

    def render(self) -> List[RenderedCard]:
        return [card.render() for card in self.cards]

    def toggle(self, position: int) -> RenderedCard:
        """Toggle the card at ``position``; other cards are untouched."""
        return self.cards[position].toggle()

    def entrance_plan(
        self,
        card_heights: Sequence[float],
        min_offset: float = 1.0,
        min_height: float = 1.0,
    ) -> EntrancePlan:
        """
        Build the entrance animation plan. Only the first call gets one.

        Each card starts ``height * position + min_offset`` below its resting
        place, so cards further down travel further and arrive later. Offsets
        strictly increase with position: a card never starts closer than
        ``min_offset`` beyond the card above it.

        Args:
            card_heights: Height of each card, in list order. Heights below
                ``min_height`` are raised to it; missing heights repeat the
                last known one.
            min_offset: Offset added to every card, so even the first card
                moves.
            min_height: Smallest height a card counts as. Must be positive.

        Returns:
            EntrancePlan: Fade for the list and one slide per card, or an
            empty plan if the entrance already played.
        """
        if min_height <= 0:
            raise ValueError(f'min_height must be positive: {min_height}')
        if min_offset <= 0:
            raise ValueError(f'min_offset must be positive: {min_offset}')

        if self.entrance_played:
            return EntrancePlan()
        self.entrance_played = True

        slides = []
        height = min_height
        previous = None
        for position in range(len(self.cards)):
            if position < len(card_heights):
                height = max(card_heights[position], min_height)
            offset_y = height * position + min_offset
            if previous is not None:
                offset_y = max(offset_y, previous + min_offset)
            slides.append(SlideIn(position=position, offset_y=offset_y))
            previous = offset_y

        return EntrancePlan(fade=LIST_FADE_IN, slides=slides)

    def remount(self) -> ListPresenter:
        """Fresh presenter over the same entries: all collapsed, entrance unplayed."""
        return ListPresenter(self.entries, self.strings, self.assets)
