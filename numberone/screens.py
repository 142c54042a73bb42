"""Menu, records and game screens drawn with pygame."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from numberone.game import FIELD_HEIGHT, FIELD_WIDTH, TypingGame  # noqa: E402
from numberone.records import load_records  # noqa: E402
from numberone.words import load_word_list  # noqa: E402

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BUTTON_FILL = (139, 90, 43)
FRAME_RATE = 60
WORD_CHARACTER_SIZE = 25


@dataclass
class Assets:
    """Locations of the fonts, images and data files below one directory."""

    root: Path = Path("../Assets")
    fonts_dir: Path = field(init=False)
    images_dir: Path = field(init=False)
    buttons_dir: Path = field(init=False)
    records_file: Path = field(init=False)
    words_file: Path = field(init=False)
    font_files: tuple[Path, ...] = field(init=False)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.fonts_dir = self.root / "fonts"
        self.images_dir = self.root / "Images"
        self.buttons_dir = self.root / "ButtonTextures"
        self.records_file = self.root / "records" / "records.txt"
        self.words_file = self.root / "wordsList" / "wordsList_1.txt"
        self.font_files = tuple(
            self.fonts_dir / name
            for name in ("BungeeSpice.ttf", "modak.ttf", "Rubic.ttf", "SansSerif.ttf")
        )


@dataclass
class Button:
    """A clickable rectangle with an optional caption."""

    x: float
    y: float
    width: float
    height: float
    label: str = ""
    label_pos: tuple[float, float] = (0.0, 0.0)
    label_size: int = 18
    label_color: tuple[int, int, int] = WHITE

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside; left and top edges are inside."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


class _Choice(enum.Enum):
    GAME = "game"
    RECORDS = "records"
    EXIT = "exit"


def _open_window(title: str) -> pygame.Surface:
    surface = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
    pygame.display.set_caption(title)
    return surface


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, FileNotFoundError, pygame.error):
        print(f"Failed to load font {path.name}")
        return pygame.font.Font(None, size)


def _load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (OSError, FileNotFoundError, pygame.error):
        print(f"Failed to load {path.name}")
        return None


def _fit(image: Optional[pygame.Surface], size: tuple[float, float]) -> Optional[pygame.Surface]:
    if image is None:
        return None
    return pygame.transform.smoothscale(image, (int(size[0]), int(size[1])))


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    pos: Sequence[float],
) -> None:
    x, y = pos
    for line in text.split("\n"):
        surface.blit(font.render(line, True, color), (x, y))
        y += font.get_linesize()


def _draw_button(
    surface: pygame.Surface,
    button: Button,
    skin: Optional[pygame.Surface],
    font: Optional[pygame.font.Font] = None,
) -> None:
    if skin is not None:
        surface.blit(skin, (button.x, button.y))
    else:
        pygame.draw.rect(surface, BUTTON_FILL, (button.x, button.y, button.width, button.height))
    if font is not None and button.label:
        _draw_text(surface, font, button.label, button.label_color, button.label_pos)


def _draw_background(surface: pygame.Surface, image: Optional[pygame.Surface]) -> None:
    surface.fill(BLACK)
    if image is not None:
        surface.blit(image, (0, 0))


def _left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1


def _menu_loop(assets: Assets) -> _Choice:
    window = _open_window("Welcome to Number One!")
    title_font = _load_font(assets.font_files[0], 32)
    button_font = _load_font(assets.font_files[0], 18)
    wooden = _load_image(assets.buttons_dir / "woodenBtn.png")
    back_image = _load_image(assets.buttons_dir / "backArrow.png")
    background = _load_image(assets.images_dir / "bgpicture.png")
    instruction_image = _load_image(assets.images_dir / "bg_instruction.png")

    start = Button(450, 300, 150, 50, "StartGame", (470, 310))
    records = Button(450, 385, 150, 50, "Records", (480, 395))
    instruction = Button(450, 470, 150, 50, "Instruction", (460, 480))
    exit_button = Button(450, 555, 150, 50, "Exit", (500, 565))
    back = Button(0, 0, 70, 70)
    menu_buttons = (start, instruction, records, exit_button)
    wooden_skin = _fit(wooden, (150, 50))
    back_skin = _fit(back_image, (back.width, back.height))

    clock = pygame.time.Clock()
    showing_instruction = False
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return _Choice.EXIT
            if not _left_click(event):
                continue
            pos = event.pos
            if showing_instruction:
                if back.contains(pos):
                    showing_instruction = False
                continue
            if start.contains(pos):
                return _Choice.GAME
            if records.contains(pos):
                return _Choice.RECORDS
            if instruction.contains(pos):
                showing_instruction = True
            if exit_button.contains(pos):
                return _Choice.EXIT

        if showing_instruction:
            _draw_background(window, instruction_image)
            _draw_button(window, back, back_skin)
        else:
            _draw_background(window, background)
            for button in menu_buttons:
                _draw_button(window, button, wooden_skin, button_font)
            _draw_text(
                window, title_font, "Welcome to NumberOne \n typing game Challange", WHITE, (300, 100)
            )
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def run_menu(assets: Assets) -> None:
    """Show the start menu until the player leaves the program."""
    if not assets.records_file.is_file():
        print("Could not load words list")
        return
    pygame.init()
    while True:
        choice = _menu_loop(assets)
        if choice is _Choice.RECORDS:
            if not run_records(assets):
                return
        elif choice is _Choice.GAME:
            if not run_game(assets):
                return
        else:
            return


def run_records(assets: Assets) -> bool:
    """Show the ten best scores; True if the player asked to go back."""
    records = load_records(assets.records_file)
    pygame.init()
    window = _open_window("Records")
    background = _load_image(assets.images_dir / "records_bg.png")
    title_font = _load_font(assets.font_files[0], 35)
    entry_font = _load_font(assets.font_files[0], 20)
    back = Button(20, 10, 50, 50)
    back_skin = _fit(_load_image(assets.buttons_dir / "backArrow.png"), (back.width, back.height))
    lines = [
        (f"{record.name} - Score: {record.score}", (50, 100 + position * 40))
        for position, record in enumerate(records)
    ]

    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if _left_click(event) and back.contains(event.pos):
                return True
        _draw_background(window, background)
        _draw_text(window, title_font, "Top Record", WHITE, (50, 50))
        _draw_button(window, back, back_skin)
        for text, pos in lines:
            _draw_text(window, entry_font, text, WHITE, pos)
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def _handle_key(game: TypingGame, key: int) -> None:
    if key == pygame.K_ESCAPE:
        game.toggle_pause()
    if key in (pygame.K_LCTRL, pygame.K_RCTRL):
        game.cycle_font()
    if key == pygame.K_PAGEUP:
        game.speed_up()
    elif key == pygame.K_PAGEDOWN:
        game.slow_down()
    elif key == pygame.K_BACKSPACE:
        game.type_char("\b")


def run_game(assets: Assets) -> bool:
    """Play one round; True if the player asked to return to the menu."""
    for font_file in assets.font_files:
        if not font_file.is_file():
            print(f"Could not load font {font_file.name}")
            return False
    background_file = assets.images_dir / "game_bc.png"
    if not background_file.is_file():
        print("Could not load game_bc.png")
        return False
    if not assets.words_file.is_file():
        print("Could not load words list")
        return False
    try:
        game = TypingGame(
            load_word_list(assets.words_file),
            FIELD_WIDTH,
            FIELD_HEIGHT,
            score_file=assets.records_file,
            font_count=len(assets.font_files),
        )
    except ValueError as error:
        print(f"Could not start the game: {error}")
        return False

    pygame.init()
    window = _open_window("NumberOne")
    ui_font = _load_font(assets.font_files[0], 18)
    key_font = _load_font(assets.font_files[0], 12)
    caption_font = _load_font(assets.font_files[0], 10)
    banner_font = _load_font(assets.font_files[0], 50)
    word_fonts = [_load_font(path, WORD_CHARACTER_SIZE) for path in assets.font_files]
    background = _load_image(background_file)
    key_skin = _fit(_load_image(assets.buttons_dir / "keyBTN.png"), (50, 50))
    back = Button(20, 10, 30, 30)
    back_skin = _fit(_load_image(assets.buttons_dir / "backArrow.png"), (back.width, back.height))

    key_buttons = (
        (Button(1000, 50, 50, 50, "PGUP", (1010, 70), 12, BLACK), "SpeedUP", (1005, 100)),
        (Button(1000, 120, 50, 50, "PGDN", (1010, 140), 12, BLACK), "SpeedDown", (1005, 170)),
        (Button(1000, 190, 50, 50, "ESC", (1010, 210), 12, BLACK), "Pause", (1005, 240)),
    )
    center_x = FIELD_WIDTH / 2
    center_y = FIELD_HEIGHT / 2
    banner_pos = (center_x - 180, center_y - 50)

    pygame.key.start_text_input()
    clock = pygame.time.Clock()
    elapsed = 0.0
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if _left_click(event) and back.contains(event.pos):
                return True
            if event.type == pygame.KEYDOWN:
                _handle_key(game, event.key)
            elif event.type == pygame.TEXTINPUT:
                for char in event.text:
                    game.type_char(char)

        _draw_background(window, background)
        _draw_button(window, back, back_skin)
        _draw_text(window, ui_font, "Score:", BLACK, (900, 10))
        _draw_text(window, ui_font, str(game.score), BLACK, (1000, 10))
        for button, caption, caption_pos in key_buttons:
            _draw_button(window, button, key_skin, key_font)
            _draw_text(window, caption_font, caption, WHITE, caption_pos)
        if game.game_over:
            _draw_text(window, banner_font, "Game Over", RED, banner_pos)

        game.update(elapsed)
        if game.paused:
            _draw_text(window, banner_font, "pause", RED, banner_pos)
        else:
            for word in game.falling:
                font = word_fonts[word.font_index % len(word_fonts)]
                _draw_text(window, font, word.text, WHITE, (word.x, word.y))
        pygame.display.flip()
        elapsed = clock.tick(FRAME_RATE) / 1000.0