import pygame

from cellconnect.game import Cell
from cellconnect.graphics import Graphics, cell_color, cell_rect
from cellconnect.settings import CELL_SIZE, COL, ROW, SCREEN_HEIGHT, SCREEN_WIDTH


def _graphics():
    g = Graphics()
    g.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    return g


def test_cell_rect_origin():
    assert cell_rect(0, 0) == pygame.Rect(240, 150, CELL_SIZE, CELL_SIZE)


def test_cell_rect_neighbours_touch():
    a = cell_rect(2, 3)
    assert cell_rect(2, 4).left == a.right
    assert cell_rect(3, 3).top == a.bottom


def test_cell_colors():
    assert cell_color(Cell.END) == (253, 253, 150, 255)
    assert cell_color(Cell.START) == (119, 221, 119, 255)
    assert cell_color(Cell.EMPTY) == (255, 255, 255, 255)
    assert cell_color(Cell.PATH) == (174, 198, 207, 10)
    assert cell_color(7) == cell_color(Cell.PATH)


def test_draw_board_fills_cells():
    g = _graphics()
    board = [[Cell.EMPTY] * COL for _ in range(ROW)]
    board[0][0] = Cell.START
    board[5][5] = Cell.END
    g.draw_board(board)
    for row, col in [(0, 0), (5, 5), (2, 3)]:
        center = cell_rect(row, col).center
        assert tuple(g.screen.get_at(center))[:3] == cell_color(board[row][col])[:3]
    corner = cell_rect(2, 3).topleft
    assert tuple(g.screen.get_at(corner))[:3] == (0, 0, 0)


def test_prepare_scene_without_background_clears():
    g = _graphics()
    g.screen.fill((255, 255, 255))
    g.prepare_scene(None)
    assert tuple(g.screen.get_at((400, 300)))[:3] == (0, 0, 0)


def test_prepare_scene_stretches_background():
    g = _graphics()
    bg = pygame.Surface((2, 2))
    bg.fill((200, 10, 20))
    g.prepare_scene(bg)
    assert tuple(g.screen.get_at((SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1)))[:3] == (200, 10, 20)


def test_render_texture_places_at_position():
    g = _graphics()
    tex = pygame.Surface((5, 5))
    tex.fill((10, 20, 30))
    g.render_texture(tex, 100, 50)
    assert tuple(g.screen.get_at((102, 52)))[:3] == (10, 20, 30)
    assert tuple(g.screen.get_at((99, 49)))[:3] == (0, 0, 0)


def test_load_texture_round_trip(tmp_path):
    path = tmp_path / "img.bmp"
    surface = pygame.Surface((7, 4))
    pygame.image.save(surface, str(path))
    loaded = Graphics().load_texture(str(path))
    assert loaded.get_size() == (7, 4)


def test_load_texture_missing_file(tmp_path):
    assert Graphics().load_texture(str(tmp_path / "missing.png")) is None