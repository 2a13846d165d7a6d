"""Fixed dimensions, timings and asset names used by the game."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
CELL_SIZE = 60
ROW = 6
COL = 6

BOARD_LEFT = 240
BOARD_TOP = 150

TIME_LIMIT = 25
WINDOW_TITLE = "connect the cells"

BACKGROUND = "bg.jpg"
BACKGROUND_1 = "bg1.jpg"
BACKGROUND_2 = "bg2.jpg"
MUSIC = "musicc.mp3"

TIMER_FONT = "C:/Windows/Fonts/Arial.ttf"
TIMER_FONT_SIZE = 35
TIMER_POSITION = (330, 35)

MESSAGE_FONT = "C:/Windows/Fonts/BAUHS93.ttf"
MESSAGE_FONT_SIZE = 60
TEXT_COLOR = (100, 100, 200, 150)