# numberone

A small typing game. Words appear at the left of the window and drift to the
right. Type a word exactly and it drops down the screen, and you score 10
points. If a word still travelling reaches the right edge, the "Game Over"
banner appears.

## Installing

```
pip install .
```

## Playing

```
numberone
numberone --assets path/to/Assets
```

`--assets` names the directory holding fonts, images, the word list and the
records file; it defaults to `../Assets`.

The start menu has four buttons:

- **StartGame** starts a round.
- **Records** shows the ten highest scores.
- **Instruction** shows the instruction page. Click the back arrow to return.
- **Exit** closes the game.

Keys during a round:

| Key           | Effect                                          |
|---------------|-------------------------------------------------|
| letters       | type into the current input (ASCII letters only) |
| Backspace     | delete the last typed letter                    |
| Page Up       | speed new words up, to at most 2.0              |
| Page Down     | slow new words down, to at least 0.05           |
| Esc           | pause or resume                                 |
| Ctrl          | use the next of the four fonts for new words    |

A new word appears every two seconds. Each word you type correctly makes the
words after it a little faster. While paused, words do not move, typing and
the speed keys are ignored, and the "pause" banner is shown. Click the back
arrow in the top-left corner to return to the menu.

Every time a word is typed, the running score of `Player1` is appended to the
records file as a line `Player1 <score>`. The records screen sorts the lines
from highest to lowest score and shows the top ten.

## Using it as a library

The game rules do not depend on the window, so you can drive them yourself:

```python
import random
from numberone.game import TypingGame
from numberone.records import load_records

game = TypingGame(["apple", "pear"], 1080, 720, random.Random(1), "records.txt", 4)
word = game.spawn_word()
for ch in word.text:
    game.type_char(ch)
print(game.score)          # 10
game.update(1 / 60)        # advance one frame

for record in load_records("records.txt", 10):
    print(record.name, record.score)
```

- `numberone.game.TypingGame` holds a round: `falling` words, `user_input`,
  `word_speed`, `paused`, `game_over` and `score`, with `toggle_pause`,
  `cycle_font`, `speed_up`, `slow_down`, `type_char`, `spawn_word` and
  `update`.
- `numberone.records.RecordManager` keeps one player's score, with
  `add_points`, `save_to_file` and `load_from_file`;
  `numberone.records.load_records` returns the best `PlayerRecord`s of a file.
- `numberone.words.WordGenerator` keeps a list of moving `Word`s and marks one
  as hit when a typed string matches it; `numberone.words.load_word_list`
  reads a whitespace-separated word list from a file.

## Assets

`numberone.screens.Assets` describes the layout below the assets directory:
`fonts/` (BungeeSpice.ttf, modak.ttf, Rubic.ttf, SansSerif.ttf), `Images/`,
`ButtonTextures/`, `records/records.txt` and `wordsList/wordsList_1.txt`.
The menu does not open without the records file. A round does not start
without all four fonts, `Images/game_bc.png` and a non-empty word list. Other
missing images and fonts are reported and replaced by plain shapes or the
default font.

## What it does not do

The player name is always `Player1`; there is no way to enter a name. The
game does not end a round by itself after "Game Over": the banner stays up
until you return to the menu or close the window.