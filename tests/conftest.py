"""Shared pytest fixtures for blockjump tests."""

import pytest

from blockjump.catalog import load_catalog
from blockjump.search import SearchIndex
from blockjump.ui.jump import JumpPresenter


@pytest.fixture
def button_records():
    """Three blocks where one title is an exact match for 'Button'."""
    return [
        {"id": "1", "title": "Button"},
        {"id": "2", "title": "Buttonx"},
        {"id": "3", "title": "Card"},
    ]


@pytest.fixture
def hero_catalog():
    """One block and one pattern that both match 'Hero'."""
    return load_catalog(
        [{"id": "a", "title": "Hero Banner"}],
        [{"id": "b", "title": "Hero Pattern", "content": "<p>x</p>"}],
    )


@pytest.fixture
def hero_index(hero_catalog):
    return SearchIndex.build(hero_catalog)


@pytest.fixture
def presenter(hero_catalog, hero_index):
    """Presenter over the hero catalog, with no listener."""
    return JumpPresenter(hero_catalog, hero_index)


@pytest.fixture
def open_presenter(presenter):
    """Presenter with the overlay already open."""
    presenter.toggle_overlay()
    return presenter
