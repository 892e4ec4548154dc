"""Fixed constants of the catalog subsystem."""

import arcade

HOTBAR_SLOT_COUNT = 9
"""Number of hotbar slots."""

SLOT_KEYS: dict[int, int] = {
    arcade.key.KEY_1: 0,
    arcade.key.KEY_2: 1,
    arcade.key.KEY_3: 2,
    arcade.key.KEY_4: 3,
    arcade.key.KEY_5: 4,
    arcade.key.KEY_6: 5,
    arcade.key.KEY_7: 6,
    arcade.key.KEY_8: 7,
    arcade.key.KEY_9: 8,
}
"""Digit keys mapped to the hotbar slot they activate."""

CLOSE_KEYS = (arcade.key.E, arcade.key.ESCAPE)
TOGGLE_MODE_KEY = arcade.key.B
DESELECT_KEY = arcade.key.Q
