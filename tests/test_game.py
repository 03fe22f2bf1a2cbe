import random

from blockblast.board import ANIMATION_STEPS, BOARD_SIZE, POINTS_PER_LINE
from blockblast.game import CELL_PIXELS, PLACEMENT_POINTS, SLOT_COUNT, Game, Screen
from blockblast.shapes import COLORS, SHAPE_TEMPLATES, BlockShape


def make_game(seed=7):
    return Game(random.Random(seed))


def started(seed=7):
    game = make_game(seed)
    game.start()
    return game


def single(shape_id):
    return BlockShape(((0, 0),), "#ff6b6b", shape_id)


def test_new_game_is_loading():
    game = make_game()
    assert game.screen is Screen.LOADING
    assert game.loading_progress == 0
    assert game.score == 0


def test_loading_reaches_menu_after_twenty_steps():
    game = make_game()
    for _ in range(19):
        game.advance_loading()
    assert game.screen is Screen.LOADING
    assert game.advance_loading() == 100
    assert game.screen is Screen.MENU


def test_loading_stops_at_hundred():
    game = make_game()
    for _ in range(25):
        game.advance_loading()
    assert game.loading_progress == 100


def test_start_deals_three_shapes():
    game = started()
    assert game.screen is Screen.GAME
    assert len(game.slots) == SLOT_COUNT
    assert [shape.id for shape in game.slots] == list(range(SLOT_COUNT))
    for shape in game.slots:
        assert shape.cells in SHAPE_TEMPLATES
        assert shape.color in COLORS
    assert game.score_text == "Счет: 0"


def test_start_resets_score():
    game = started()
    game.update_score(40)
    game.start()
    assert game.score == 0


def test_update_score_accumulates():
    game = make_game()
    total = game.update_score(PLACEMENT_POINTS)
    assert total == PLACEMENT_POINTS
    assert game.update_score(POINTS_PER_LINE) == total + POINTS_PER_LINE
    assert game.score == total + POINTS_PER_LINE


def test_handle_drop_places_shape():
    game = started()
    shape = game.slots[0]
    assert game.handle_drop(shape.id, 0, 0) is True
    assert game.slots[0] is None
    assert game.score == PLACEMENT_POINTS
    for cell in shape.cells:
        assert game.board.is_filled(cell.row, cell.col)


def test_handle_drop_maps_pixels_to_cells():
    game = started()
    shape = game.slots[1]
    assert game.handle_drop(shape.id, 3 * CELL_PIXELS + 49, 2 * CELL_PIXELS + 10)
    for cell in shape.cells:
        assert game.board.is_filled(2 + cell.row, 3 + cell.col)


def test_unknown_id_is_ignored():
    game = started()
    before = list(game.slots)
    assert game.handle_drop(999, 0, 0) is False
    assert game.slots == before
    assert game.score == 0


def test_drop_off_board_is_rejected():
    game = started()
    shape = game.slots[0]
    assert game.handle_drop(shape.id, BOARD_SIZE * CELL_PIXELS, 0) is False
    assert game.slots[0] == shape
    assert game.board.colors == {}


def test_drop_on_filled_cells_is_rejected():
    game = started()
    game.board.colors.update(
        {(r, c): "#4ecdc4" for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)}
    )
    shape = game.slots[2]
    assert game.handle_drop(shape.id, 0, 0) is False
    assert game.slots[2] == shape
    assert game.score == 0


def test_placing_all_three_deals_new_shapes():
    game = started()
    positions = [(0, 0), (6 * CELL_PIXELS, 0), (0, 6 * CELL_PIXELS)]
    for shape, (x, y) in zip(list(game.slots), positions):
        assert game.handle_drop(shape.id, x, y)
    assert [shape.id for shape in game.slots] == [3, 4, 5]
    assert game.score == SLOT_COUNT * PLACEMENT_POINTS
    assert game.screen is Screen.GAME


def test_full_row_is_cleared_after_animation():
    game = started()
    game.board.colors.update({(0, c): "#4ecdc4" for c in range(1, BOARD_SIZE)})
    game.slots = [single(100), game.slots[1], game.slots[2]]
    assert game.handle_drop(100, 0, 0)
    frames = []
    while game.board.animation is not None:
        frames.append(game.tick_clearing())
    assert len(frames) == ANIMATION_STEPS
    assert frames == [True, False, True, False, True]
    assert not any(game.board.is_filled(0, c) for c in range(BOARD_SIZE))
    assert game.score == PLACEMENT_POINTS + POINTS_PER_LINE


def test_tick_clearing_without_animation():
    game = started()
    assert game.tick_clearing() is None
    assert game.score == 0


def test_game_over_when_nothing_fits():
    game = started()
    game.board.colors.update(
        {(r, c): "#96ceb4" for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if (r, c) != (0, 0)}
    )
    game.slots = [single(100), None, None]
    assert game.handle_drop(100, 10, 10)
    assert game.screen is Screen.SCREAMER
    assert all(shape is not None for shape in game.slots)


def test_return_to_menu_clears_board():
    game = started()
    game.handle_drop(game.slots[0].id, 0, 0)
    game.return_to_menu()
    assert game.screen is Screen.MENU
    assert game.board.colors == {}
    assert game.board.animation is None