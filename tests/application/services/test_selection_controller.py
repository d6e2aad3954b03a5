"""Tests for SelectionController."""

import json

import pytest

from livetv.application.services import ChannelRegistry, SelectionController
from livetv.domain.entities import ActivationToken, Channel, create_channel
from livetv.domain.exceptions import ChannelNotFoundError


@pytest.fixture
async def loaded(store, registry: ChannelRegistry) -> tuple[Channel, ...]:
    """Bootstrap the registry with three channels."""
    store.data["channels"] = json.dumps(
        [
            {"name": "One", "url": "https://example.com/1.m3u8"},
            {"name": "Two", "url": "https://example.com/2.m3u8"},
            {"name": "Three", "url": "https://example.com/3.m3u8"},
        ]
    )
    return await registry.bootstrap()


class TestDeriveAfterLoad:
    """derive_after_load tests."""

    async def test_selects_first(self, selection: SelectionController, loaded) -> None:
        """Test that the first channel is selected after load."""
        selected = selection.derive_after_load(loaded)

        assert selected is loaded[0]
        assert selection.token == ActivationToken.from_url(loaded[0].url)

    def test_empty_list(self, selection: SelectionController) -> None:
        """Test that an empty list leaves nothing selected."""
        assert selection.derive_after_load([]) is None
        assert selection.selected is None
        assert selection.token is None


class TestSelect:
    """select tests."""

    async def test_new_url_gives_new_token(
        self, selection: SelectionController, loaded
    ) -> None:
        """Test that selecting a different URL changes the token."""
        selection.derive_after_load(loaded)
        before = selection.token

        token = selection.select(loaded[2])

        assert token != before
        assert token == ActivationToken.from_url(loaded[2].url)
        assert selection.selected is loaded[2]

    async def test_same_url_keeps_token(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that a different channel with the same URL keeps the token."""
        twin = registry.add("Twin", loaded[0].url)
        selection.derive_after_load(loaded)
        before = selection.token

        token = selection.select(twin)

        assert token == before
        assert selection.selected is twin

    async def test_reselect_keeps_token(
        self, selection: SelectionController, loaded
    ) -> None:
        """Test that selecting the same channel again is a no-op for the token."""
        first = selection.select(loaded[1])

        assert selection.select(loaded[1]) == first

    async def test_non_member_raises(
        self, selection: SelectionController, loaded
    ) -> None:
        """Test that only registry members can be selected."""
        selection.derive_after_load(loaded)
        stranger = create_channel("One", "https://example.com/1.m3u8")

        with pytest.raises(ChannelNotFoundError):
            selection.select(stranger)

        assert selection.selected is loaded[0]


class TestReconcileAfterRemoval:
    """reconcile_after_removal tests."""

    async def test_removed_selection_moves_to_first(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that removing the selected channel selects the new first one."""
        selection.select(loaded[1])
        before = selection.token

        registry.remove(loaded[1])
        selected = selection.reconcile_after_removal(True, registry.channels)

        assert selected is loaded[0]
        assert selection.token != before

    async def test_other_removal_keeps_selection(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that removing another channel leaves the selection alone."""
        selection.select(loaded[2])

        registry.remove(loaded[0])
        selected = selection.reconcile_after_removal(False, registry.channels)

        assert selected is loaded[2]

    async def test_last_removal_clears(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that emptying the list clears the selection."""
        selection.derive_after_load(loaded)

        for channel in loaded:
            was_selected = selection.is_selected(channel)
            registry.remove(channel)
            selection.reconcile_after_removal(was_selected, registry.channels)

        assert selection.selected is None
        assert selection.token is None


class TestReconcileAfterEdit:
    """reconcile_after_edit tests."""

    async def test_selection_follows_edit(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that editing the selected channel moves the selection."""
        selection.select(loaded[1])
        before = selection.token

        edited = registry.edit(loaded[1], "Two", "https://example.com/2b.m3u8")
        selected = selection.reconcile_after_edit(loaded[1], edited)

        assert selected is edited
        assert selection.token != before

    async def test_rename_keeps_token(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that a name-only edit keeps the token."""
        selection.select(loaded[1])
        before = selection.token

        edited = registry.edit(loaded[1], "Deux", loaded[1].url)
        selection.reconcile_after_edit(loaded[1], edited)

        assert selection.selected is edited
        assert selection.token == before

    async def test_other_edit_keeps_selection(
        self, registry: ChannelRegistry, selection: SelectionController, loaded
    ) -> None:
        """Test that editing another channel leaves the selection alone."""
        selection.select(loaded[0])

        edited = registry.edit(loaded[2], "Trois", "https://example.com/3b.m3u8")
        selected = selection.reconcile_after_edit(loaded[2], edited)

        assert selected is loaded[0]
