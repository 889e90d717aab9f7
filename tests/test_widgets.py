import pytest
from kivy.animation import Animation

from thirtydays.presenter import ICON_EXPAND_LESS, ICON_EXPAND_MORE, ListPresenter
from thirtydays.screens import MotorcyclesList
from thirtydays.theme import load_theme
from thirtydays.theme.icons import icon_glyph
from thirtydays.widgets import MotorcycleCard


def running_animations(widget, prop):
    """Animations currently driving ``prop`` on ``widget``."""
    return [
        animation
        for animation in Animation._instances
        if widget.uid in animation._widgets and prop in animation.animated_properties
    ]


@pytest.fixture(scope='module', autouse=True)
def theme():
    load_theme()


@pytest.fixture
def mounted():
    """Tracks created widgets and stops their animations afterwards."""
    widgets = []
    yield widgets
    for widget in widgets:
        Animation.cancel_all(widget)
        for card in getattr(widget, 'cards', []):
            Animation.cancel_all(card)


@pytest.fixture
def presenter(harley, ducati, strings, assets) -> ListPresenter:
    return ListPresenter([harley, ducati], strings, assets)


@pytest.fixture
def make_card(mounted, presenter):
    def make(position=0):
        card = MotorcycleCard(presenter=presenter.card(position))
        mounted.append(card)
        return card

    return make


@pytest.fixture
def make_list(mounted):
    def make(list_presenter):
        motorcycles = MotorcyclesList(presenter=list_presenter)
        mounted.append(motorcycles)
        return motorcycles

    return make


class TestMotorcycleCard:
    def test_starts_collapsed(self, make_card) -> None:
        card = make_card()

        assert card.expanded is False
        assert card._quote_label not in card.children
        assert card.ids.day_label.text == 'Day 1'
        assert card.ids.make_label.text == 'Harley'
        assert card.ids.toggle_button.icon == ICON_EXPAND_MORE
        assert card.ids.toggle_button.text == icon_glyph(ICON_EXPAND_MORE)

    def test_accessibility_labels(self, make_card) -> None:
        card = make_card()

        assert card.ids.toggle_button.content_description == 'expand button'
        assert card.ids.image.content_description == 'Harley'

    def test_toggle_button_reveals_quote(self, make_card) -> None:
        card = make_card()
        card.do_layout()
        assert running_animations(card, 'height') == []

        card.ids.toggle_button.dispatch('on_release')

        assert card.expanded is True
        assert card._quote_label in card.children
        assert card._quote_label.text == 'Quote1'
        assert card.ids.toggle_button.icon == ICON_EXPAND_LESS
        assert card.ids.toggle_button.text == icon_glyph(ICON_EXPAND_LESS)

    def test_toggle_animates_height(self, make_card) -> None:
        card = make_card()
        card.do_layout()

        card.ids.toggle_button.dispatch('on_release')
        card._quote_label.texture_update()
        card.do_layout()

        assert len(running_animations(card, 'height')) == 1

    def test_double_toggle_restores_card(self, make_card) -> None:
        card = make_card()

        card.toggle()
        card.toggle()

        assert card.expanded is False
        assert card._quote_label not in card.children
        assert card.ids.toggle_button.icon == ICON_EXPAND_MORE
        assert card.quote_text == ''

    def test_cards_toggle_independently(self, make_card) -> None:
        first = make_card(0)
        second = make_card(1)

        first.toggle()

        assert first.expanded is True
        assert second.expanded is False
        assert second._quote_label not in second.children
        assert second.ids.day_label.text == 'Day 2'


class TestMotorcyclesList:
    def test_one_card_per_entry(self, make_list, presenter) -> None:
        motorcycles = make_list(presenter)

        assert len(motorcycles.cards) == 2
        assert list(reversed(motorcycles.ids.card_box.children)) == motorcycles.cards
        assert [card.day_text for card in motorcycles.cards] == ['Day 1', 'Day 2']

    def test_first_entrance(self, make_list, presenter) -> None:
        motorcycles = make_list(presenter)
        assert motorcycles.opacity == 0

        animations = motorcycles.play_entrance()

        assert len(animations) == 3
        assert motorcycles.entrance_animations == animations
        assert animations[0].animated_properties == {'opacity': 1}
        assert all(
            animation.animated_properties == {'slide_offset': 0}
            for animation in animations[1:]
        )

        offsets = [card.slide_offset for card in motorcycles.cards]
        assert offsets[0] > 0
        assert offsets[0] < offsets[1]

    def test_entrance_does_not_replay(self, make_list, presenter) -> None:
        motorcycles = make_list(presenter)
        first = motorcycles.play_entrance()

        motorcycles.cards[0].toggle()

        assert motorcycles.play_entrance() == []
        assert motorcycles.entrance_animations == first

    def test_empty_list_only_fades(self, make_list, strings, assets) -> None:
        motorcycles = make_list(ListPresenter([], strings, assets))

        animations = motorcycles.play_entrance()

        assert motorcycles.cards == []
        assert len(animations) == 1
        assert animations[0].animated_properties == {'opacity': 1}

    def test_switching_back_to_played_presenter_is_visible(
        self, make_list, presenter, harley, strings, assets
    ) -> None:
        motorcycles = make_list(presenter)
        motorcycles.play_entrance()

        other = ListPresenter([harley], strings, assets)
        motorcycles.presenter = other
        assert motorcycles.opacity == 0
        motorcycles.play_entrance()

        motorcycles.presenter = presenter

        assert motorcycles.opacity == 1
        assert len(motorcycles.cards) == 2
        assert motorcycles.play_entrance() == []

    def test_remount_replays_entrance_collapsed(self, make_list, presenter) -> None:
        motorcycles = make_list(presenter)
        motorcycles.play_entrance()
        motorcycles.cards[0].toggle()

        motorcycles.presenter = presenter.remount()

        assert motorcycles.opacity == 0
        assert not any(card.expanded for card in motorcycles.cards)
        assert len(motorcycles.play_entrance()) == 3

    def test_entrance_without_presenter(self, make_list, presenter) -> None:
        motorcycles = make_list(presenter)

        motorcycles.presenter = None

        assert motorcycles.play_entrance() == []
        assert motorcycles.cards == []
        assert motorcycles.opacity == 1
