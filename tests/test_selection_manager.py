"""Unit tests for SelectionManager."""

import unittest
from unittest.mock import MagicMock

import arcade

from loco.events import EventBus
from loco.systems.catalog.base import CatalogItem
from loco.systems.catalog.events import CatalogItemRemovedEvent, CatalogLoadedEvent, CatalogTabChangedEvent
from loco.systems.selection.events import (
    CatalogClosedEvent,
    CatalogOpenedEvent,
    ItemSelectedEvent,
    SelectionModeChangedEvent,
    SlotSelectedEvent,
)
from loco.systems.selection.manager import SelectionManager
from loco.types import ItemKind, SelectionMode


def _item(item_id: str) -> CatalogItem:
    return CatalogItem(id=item_id, kind=ItemKind.MODEL, file_name=f"{item_id}.glb", url=f"/{item_id}.glb")


class TestSelectionManager(unittest.TestCase):
    """Unit test class for SelectionManager."""

    def setUp(self) -> None:
        """Set up SelectionManager with mock hotbar and scene bridge."""
        self.manager = SelectionManager()

        self.mock_context = MagicMock()
        self.mock_event_bus = MagicMock()
        self.mock_context.event_bus = self.mock_event_bus

        self.slots: list[CatalogItem | None] = [None] * 9
        self.mock_hotbar = MagicMock()
        self.mock_hotbar.get_item.side_effect = lambda index: self.slots[index]
        self.mock_context.hotbar_manager = self.mock_hotbar

        self.mock_scene = MagicMock()
        self.mock_scene.place_in_scene.return_value = "entity-1"
        self.mock_context.scene_manager = self.mock_scene

        self.manager.setup(self.mock_context)
        self.manager.open()
        self.mock_event_bus.reset_mock()

    def _published(self, event_type: type) -> list:
        return [c[0][0] for c in self.mock_event_bus.publish.call_args_list if isinstance(c[0][0], event_type)]

    def test_select_item_in_browse_mode_only_selects(self) -> None:
        """Test that browse-mode selection never touches the hotbar."""
        self.manager.selected_slot_index = 3
        item = _item("a")

        self.manager.select_item(item)

        assert self.manager.selected_item is item
        self.mock_hotbar.assign.assert_not_called()
        assert self._published(ItemSelectedEvent)[0].item_id == "a"

    def test_select_item_in_assign_mode_assigns_to_selected_slot(self) -> None:
        """Test that selecting in assign-to-slot mode assigns the item."""
        self.manager.set_mode(SelectionMode.ASSIGN_TO_SLOT)
        self.manager.selected_slot_index = 4
        item = _item("a")

        self.manager.select_item(item)

        self.mock_hotbar.assign.assert_called_once_with(item, 4)

    def test_select_item_in_assign_mode_without_slot(self) -> None:
        """Test that assign mode with no slot chosen only selects."""
        self.manager.set_mode(SelectionMode.ASSIGN_TO_SLOT)

        self.manager.select_item(_item("a"))

        self.mock_hotbar.assign.assert_not_called()

    def test_select_occupied_slot_selects_and_places(self) -> None:
        """Test that activating an occupied slot selects its item and places it."""
        item = _item("a")
        self.slots[1] = item

        self.manager.select_slot(1)

        assert self.manager.selected_slot_index == 1
        assert self.manager.selected_item is item
        self.mock_scene.place_in_scene.assert_called_once_with(item)
        assert self._published(SlotSelectedEvent)[0].slot_index == 1

    def test_key_on_empty_slot_selects_without_placing(self) -> None:
        """Test that pressing 3 on an empty slot selects slot index 2 and places nothing."""
        self.manager.selected_item = _item("stale")

        consumed = self.manager.on_key_press(arcade.key.KEY_3, 0)

        assert consumed is True
        assert self.manager.selected_slot_index == 2
        assert self.manager.selected_item is None
        self.mock_scene.place_in_scene.assert_not_called()

    def test_empty_slot_publishes_cleared_selection(self) -> None:
        """Test that activating an empty slot tells subscribers the item selection was cleared."""
        self.manager.selected_item = _item("stale")

        self.manager.select_slot(4)

        [event] = self._published(ItemSelectedEvent)
        assert event.item_id is None

    def test_digit_keys_map_to_slots(self) -> None:
        """Test that keys 1-9 activate slots 0-8."""
        keys = [
            arcade.key.KEY_1,
            arcade.key.KEY_2,
            arcade.key.KEY_3,
            arcade.key.KEY_4,
            arcade.key.KEY_5,
            arcade.key.KEY_6,
            arcade.key.KEY_7,
            arcade.key.KEY_8,
            arcade.key.KEY_9,
        ]
        for index, key in enumerate(keys):
            self.manager.on_key_press(key, 0)
            assert self.manager.selected_slot_index == index

    def test_out_of_range_slot_is_ignored(self) -> None:
        """Test that select_slot ignores invalid indices."""
        self.manager.select_slot(9)

        assert self.manager.selected_slot_index is None
        self.mock_event_bus.publish.assert_not_called()

    def test_close_keys(self) -> None:
        """Test that E and Escape close the catalog view."""
        for key in (arcade.key.E, arcade.key.ESCAPE):
            self.manager.open()
            self.mock_event_bus.reset_mock()

            assert self.manager.on_key_press(key, 0) is True

            assert self.manager.showing is False
            assert len(self._published(CatalogClosedEvent)) == 1

    def test_close_does_not_touch_hotbar(self) -> None:
        """Test that closing leaves the hotbar alone."""
        self.manager.close()

        self.mock_hotbar.assign.assert_not_called()
        self.mock_hotbar.clear.assert_not_called()

    def test_b_toggles_mode(self) -> None:
        """Test that B flips between browse and assign-to-slot."""
        self.manager.on_key_press(arcade.key.B, 0)
        assert self.manager.mode is SelectionMode.ASSIGN_TO_SLOT

        self.manager.on_key_press(arcade.key.B, 0)
        assert self.manager.mode is SelectionMode.BROWSE

        events = self._published(SelectionModeChangedEvent)
        assert [event.mode for event in events] == [SelectionMode.ASSIGN_TO_SLOT, SelectionMode.BROWSE]

    def test_leaving_assign_mode_keeps_selected_slot(self) -> None:
        """Test that switching back to browse keeps the selected slot."""
        self.manager.set_mode(SelectionMode.ASSIGN_TO_SLOT)
        self.manager.select_slot(6)

        self.manager.set_mode(SelectionMode.BROWSE)

        assert self.manager.selected_slot_index == 6

    def test_deselect_key_keeps_mode(self) -> None:
        """Test that Q clears the selection without changing mode."""
        self.manager.set_mode(SelectionMode.ASSIGN_TO_SLOT)
        self.manager.selected_item = _item("a")
        self.manager.selected_slot_index = 2

        assert self.manager.on_key_press(arcade.key.Q, 0) is True

        assert self.manager.selected_item is None
        assert self.manager.selected_slot_index is None
        assert self.manager.mode is SelectionMode.ASSIGN_TO_SLOT

    def test_keys_ignored_while_closed(self) -> None:
        """Test that the keyboard surface is inactive while the view is closed."""
        self.manager.close()

        assert self.manager.on_key_press(arcade.key.KEY_1, 0) is False
        assert self.manager.selected_slot_index is None

    def test_keys_ignored_while_text_input_focused(self) -> None:
        """Test that typing in a text field does not trigger shortcuts."""
        self.manager.text_input_focused = True

        assert self.manager.on_key_press(arcade.key.B, 0) is False
        assert self.manager.mode is SelectionMode.BROWSE

    def test_unbound_key_not_consumed(self) -> None:
        """Test that other keys propagate."""
        assert self.manager.on_key_press(arcade.key.Z, 0) is False

    def test_open_publishes_once(self) -> None:
        """Test that opening an open view does nothing."""
        self.manager.open()
        self.mock_event_bus.publish.assert_not_called()

        self.manager.close()
        self.manager.open()
        assert len(self._published(CatalogOpenedEvent)) == 1

    def test_confirm_selection_places_and_closes(self) -> None:
        """Test that confirming places the selected item and closes the view."""
        item = _item("a")
        self.manager.select_item(item)

        entity_id = self.manager.confirm_selection()

        assert entity_id == "entity-1"
        self.mock_scene.place_in_scene.assert_called_once_with(item)
        assert self.manager.showing is False

    def test_confirm_without_selection(self) -> None:
        """Test that confirming with nothing selected keeps the view open."""
        assert self.manager.confirm_selection() is None
        assert self.manager.showing is True

    def test_left_scene_click_places_selected_slot_item(self) -> None:
        """Test that a left click in the scene places the selected slot's item."""
        item = _item("a")
        self.slots[0] = item
        self.manager.selected_slot_index = 0

        assert self.manager.on_scene_click(arcade.MOUSE_BUTTON_LEFT) is True

        self.mock_scene.place_in_scene.assert_called_once_with(item)

    def test_left_scene_click_without_item(self) -> None:
        """Test that a left click with no slot item is not consumed."""
        assert self.manager.on_scene_click(arcade.MOUSE_BUTTON_LEFT) is False

        self.manager.selected_slot_index = 5
        assert self.manager.on_scene_click(arcade.MOUSE_BUTTON_LEFT) is False
        self.mock_scene.place_in_scene.assert_not_called()

    def test_right_scene_click_removes_entity(self) -> None:
        """Test that a right click removes the clicked entity."""
        self.mock_scene.remove_from_scene.return_value = True

        assert self.manager.on_scene_click(arcade.MOUSE_BUTTON_RIGHT, "entity-9") is True

        self.mock_scene.remove_from_scene.assert_called_once_with("entity-9")

    def test_right_scene_click_on_nothing(self) -> None:
        """Test that a right click on empty space is not consumed."""
        assert self.manager.on_scene_click(arcade.MOUSE_BUTTON_RIGHT) is False
        self.mock_scene.remove_from_scene.assert_not_called()


class TestSelectionEvents(unittest.TestCase):
    """Unit test class for SelectionManager reactions to catalog events."""

    def setUp(self) -> None:
        """Set up SelectionManager on a real event bus."""
        self.manager = SelectionManager()
        self.event_bus = EventBus()
        self.mock_context = MagicMock()
        self.mock_context.event_bus = self.event_bus
        self.manager.setup(self.mock_context)

        self.item = _item("a")
        self.manager.selected_item = self.item
        self.manager.selected_slot_index = 3

    def test_tab_change_clears_selected_item(self) -> None:
        """Test that switching tabs clears the item but not the slot."""
        self.event_bus.publish(CatalogTabChangedEvent(tab="models"))

        assert self.manager.selected_item is None
        assert self.manager.selected_slot_index == 3
        self.mock_context.hotbar_manager.clear.assert_not_called()

    def test_catalog_load_clears_selected_item(self) -> None:
        """Test that a catalog reload clears the item."""
        self.event_bus.publish(CatalogLoadedEvent(items=[self.item]))

        assert self.manager.selected_item is None

    def test_removing_selected_item_clears_it(self) -> None:
        """Test that deleting the selected item from the catalog clears it."""
        self.event_bus.publish(CatalogItemRemovedEvent(item_id="a"))

        assert self.manager.selected_item is None

    def test_removing_other_item_keeps_selection(self) -> None:
        """Test that deleting another item keeps the selection."""
        self.event_bus.publish(CatalogItemRemovedEvent(item_id="b"))

        assert self.manager.selected_item is self.item

    def test_cleanup_unsubscribes(self) -> None:
        """Test that cleanup removes the selection's event handlers."""
        self.manager.cleanup()
        self.manager.selected_item = self.item

        self.event_bus.publish(CatalogTabChangedEvent(tab="models"))

        assert self.manager.selected_item is self.item
