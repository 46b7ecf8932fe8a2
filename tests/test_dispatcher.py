import pytest

from friendlyjam.dispatcher import (
    SCREEN_SIZE,
    DispatcherItem,
    DispatcherItemPosition,
    DispatcherLevel,
    DispatcherView,
    DispatcherViewSide,
    GameDispatcher,
)
from friendlyjam.layout import Aabb, Vec2

SIGN_SIZES = {"sign_open": (10, 10), "sign_closed": (10, 10), "table": (40, 20), "monitor": (8, 8)}
SIDE_NAMES = ["FRONT", "LEFT", "RIGHT", "BACK"]


def full_screen():
    return Aabb(Vec2(0, 0), Vec2(*SCREEN_SIZE))


def make_game(items):
    level = DispatcherLevel(back=DispatcherView(items))
    game = GameDispatcher(level)
    game.set_screen(full_screen())
    return game


def test_cycle_left_order():
    assert DispatcherViewSide.FRONT.cycle_left() is DispatcherViewSide.LEFT
    assert DispatcherViewSide.LEFT.cycle_left() is DispatcherViewSide.BACK
    assert DispatcherViewSide.BACK.cycle_left() is DispatcherViewSide.RIGHT
    assert DispatcherViewSide.RIGHT.cycle_left() is DispatcherViewSide.FRONT


@pytest.mark.parametrize("name", SIDE_NAMES)
def test_cycles_are_inverse(name):
    side = DispatcherViewSide[name]
    assert DispatcherViewSide.cycle_right(DispatcherViewSide.cycle_left(side)) is side
    assert DispatcherViewSide.cycle_left(DispatcherViewSide.cycle_right(side)) is side


@pytest.mark.parametrize("name", SIDE_NAMES)
def test_four_turns_return(name):
    side = DispatcherViewSide[name]
    turned = side
    for _ in range(4):
        turned = DispatcherViewSide.cycle_right(turned)
    assert turned is side


def test_position_from_dict_defaults():
    pos = DispatcherItemPosition.from_dict({"anchor": [3, 4]})
    assert pos.anchor == Vec2(3, 4)
    assert pos.alignment == Vec2(0.5, 0.5)
    assert pos.size is None


def test_position_from_dict_full():
    pos = DispatcherItemPosition.from_dict(
        {"anchor": [1, 2], "alignment": [0, 1], "size": [30, 40]}
    )
    assert pos.alignment == Vec2(0, 1)
    assert pos.size == Vec2(30, 40)


@pytest.mark.parametrize("data", [{}, {"anchor": [1]}, {"anchor": "x"}, [1, 2]])
def test_position_from_dict_errors(data):
    with pytest.raises(ValueError):
        DispatcherItemPosition.from_dict(data)


def test_view_from_dict():
    view = DispatcherView.from_dict(
        {"items": [["DoorSign", {"anchor": [5, 6]}], ["Table", {"anchor": [7, 8]}]]}
    )
    assert [item for item, _ in view.items] == [DispatcherItem.DOOR_SIGN, DispatcherItem.TABLE]
    assert view.items[1][1].anchor == Vec2(7, 8)


def test_view_from_dict_unknown_item():
    with pytest.raises(ValueError):
        DispatcherView.from_dict({"items": [["Sofa", {"anchor": [0, 0]}]]})


def test_level_get_side():
    views = [DispatcherView() for _ in range(4)]
    level = DispatcherLevel(*views)
    assert level.get_side(DispatcherViewSide.FRONT) is views[0]
    assert level.get_side(DispatcherViewSide.LEFT) is views[1]
    assert level.get_side(DispatcherViewSide.RIGHT) is views[2]
    assert level.get_side(DispatcherViewSide.BACK) is views[3]


def test_initial_state():
    game = GameDispatcher(DispatcherLevel())
    assert game.active_side is DispatcherViewSide.BACK
    assert game.state.door_sign_open is False


def test_cursor_move_scaled_screen_center_maps_to_center():
    game = make_game([])
    screen = Aabb(Vec2(100, 50), Vec2(580, 320))
    game.set_screen(screen)
    result = game.cursor_move(screen.center())
    assert result == Vec2(*SCREEN_SIZE) * 0.5
    assert game.cursor_position_raw == screen.center()


def test_turn_left_button():
    game = make_game([])
    game.cursor_move(game.turn_left.center())
    game.cursor_press()
    assert game.active_side is DispatcherViewSide.BACK.cycle_left()


def test_turn_right_button():
    game = make_game([])
    game.cursor_move(game.turn_right.center())
    game.cursor_press()
    assert game.active_side is DispatcherViewSide.BACK.cycle_right()


def test_door_sign_toggles():
    anchor = Vec2(960, 540)
    game = make_game([(DispatcherItem.DOOR_SIGN, DispatcherItemPosition(anchor, size=Vec2(100, 100)))])
    placed = game.layout_items(SIGN_SIZES)
    assert placed[0][0] == "sign_closed"
    assert placed[0][1].contains(anchor)
    game.cursor_move(anchor)
    game.cursor_press()
    assert game.state.door_sign_open is True
    assert game.layout_items(SIGN_SIZES)[0][0] == "sign_open"
    game.cursor_press()
    assert game.state.door_sign_open is False


def test_press_outside_does_nothing():
    anchor = Vec2(960, 540)
    game = make_game([(DispatcherItem.DOOR_SIGN, DispatcherItemPosition(anchor, size=Vec2(100, 100)))])
    game.layout_items(SIGN_SIZES)
    game.cursor_move((anchor.x + 500, anchor.y))
    game.cursor_press()
    assert game.state.door_sign_open is False
    assert game.active_side is DispatcherViewSide.BACK


def test_table_press_does_not_toggle():
    anchor = Vec2(960, 540)
    game = make_game([(DispatcherItem.TABLE, DispatcherItemPosition(anchor))])
    game.layout_items(SIGN_SIZES)
    game.cursor_move(anchor)
    game.cursor_press()
    assert game.state.door_sign_open is False


def test_hitbox_without_size_matches_texture():
    game = make_game([(DispatcherItem.TABLE, DispatcherItemPosition(Vec2(500, 500)))])
    (_, hitbox), = game.layout_items(SIGN_SIZES)
    assert hitbox.size() == Vec2(*SIGN_SIZES["table"])
    assert hitbox.center() == Vec2(500, 500)


def test_hitbox_keeps_texture_aspect():
    game = make_game(
        [(DispatcherItem.TABLE, DispatcherItemPosition(Vec2(500, 500), size=Vec2(300, 300)))]
    )
    (_, hitbox), = game.layout_items(SIGN_SIZES)
    w, h = SIGN_SIZES["table"]
    assert hitbox.width() / hitbox.height() == pytest.approx(w / h)
    assert hitbox.width() == pytest.approx(300)


def test_level_is_copied():
    position = DispatcherItemPosition(Vec2(500, 500))
    level = DispatcherLevel(back=DispatcherView([(DispatcherItem.TABLE, position)]))
    game = GameDispatcher(level)
    game.layout_items(SIGN_SIZES)
    assert position.hitbox.size() == Vec2(0, 0)


def test_missing_texture_size():
    game = make_game([(DispatcherItem.MONITOR, DispatcherItemPosition(Vec2(1, 1)))])
    with pytest.raises(KeyError):
        game.layout_items({"table": (1, 1)})