import random

import pytest

from numberone.game import FallingWord, TypingGame


def make_game(words=("alpha", "beta"), **kwargs):
    kwargs.setdefault("rng", random.Random(7))
    return TypingGame(list(words), **kwargs)


def add_word(game, text, x=0.0, y=100.0):
    word = FallingWord(text=text, y=y, speed=game.word_speed, x=x)
    game.falling.append(word)
    return word


def test_empty_word_list_rejected():
    with pytest.raises(ValueError):
        TypingGame([])


def test_too_small_field_rejected():
    with pytest.raises(ValueError):
        TypingGame(["word"], field_height=50)


def test_toggle_pause_flips_state():
    game = make_game()
    assert game.toggle_pause() is True
    assert game.paused is True
    assert game.toggle_pause() is False
    assert game.paused is False


def test_cycle_font_wraps_around():
    game = make_game(font_count=4)
    seen = [game.cycle_font() for _ in range(4)]
    assert seen[-1] == 0
    assert sorted(seen) == [0, 1, 2, 3]


def test_speed_up_is_capped():
    game = make_game()
    for _ in range(100):
        game.speed_up()
    assert game.word_speed == pytest.approx(2.0)


def test_slow_down_has_floor():
    game = make_game()
    for _ in range(100):
        game.slow_down()
    assert game.word_speed == pytest.approx(0.05)


def test_speed_unchanged_while_paused():
    game = make_game()
    before = game.word_speed
    game.toggle_pause()
    game.speed_up()
    game.slow_down()
    assert game.word_speed == before


def test_type_char_collects_letters_only():
    game = make_game()
    for char in "ab1 c!":
        game.type_char(char)
    assert game.user_input == "abc"


def test_backspace_removes_last_char_and_is_safe_when_empty():
    game = make_game()
    game.type_char("\b")
    assert game.user_input == ""
    game.type_char("x")
    game.type_char("y")
    game.type_char("\b")
    assert game.user_input == "x"


def test_typing_ignored_while_paused():
    game = make_game()
    game.toggle_pause()
    game.type_char("a")
    assert game.user_input == ""


def test_matching_word_scores_and_drops(tmp_path):
    score_file = tmp_path / "records.txt"
    game = make_game(score_file=score_file)
    word = add_word(game, "beta")
    speed_before = game.word_speed
    results = [game.type_char(char) for char in "beta"]
    assert results == [False, False, False, True]
    assert game.score == 10
    assert game.user_input == ""
    assert word.speed == 0
    assert word.y_speed == 3.0
    assert word.hit
    assert game.word_speed == pytest.approx(speed_before + 0.01)
    assert score_file.read_text().splitlines() == ["Player1 10"]


def test_each_hit_appends_a_line(tmp_path):
    score_file = tmp_path / "records.txt"
    game = make_game(score_file=score_file)
    add_word(game, "alpha")
    add_word(game, "beta")
    for char in "alphabeta":
        game.type_char(char)
    assert score_file.read_text().splitlines() == ["Player1 10", "Player1 20"]


def test_spawn_word_places_word_at_left_edge():
    game = make_game(field_height=720)
    for _ in range(50):
        word = game.spawn_word()
        assert word.text in game.vocabulary
        assert word.x == 0
        assert 0 <= word.y < 720 - 50
        assert word.speed == game.word_speed
        assert word.y_speed == 0
    assert len(game.falling) == 50


def test_spawn_word_uses_current_font():
    game = make_game()
    game.cycle_font()
    assert game.spawn_word().font_index == game.font_index


def test_update_spawns_every_two_seconds():
    game = make_game()
    game.update(1.0)
    assert game.falling == []
    game.update(1.0)
    assert len(game.falling) == 1
    game.update(1.0)
    assert len(game.falling) == 1


def test_update_moves_words_by_their_speed():
    game = make_game()
    word = add_word(game, "alpha", x=10.0, y=100.0)
    game.update(0.0)
    assert word.x == pytest.approx(10.0 + game.word_speed)
    assert word.y == 100.0


def test_hit_word_falls_instead_of_moving_right():
    game = make_game()
    word = add_word(game, "beta", x=10.0, y=100.0)
    for char in "beta":
        game.type_char(char)
    game.update(0.0)
    assert word.x == 10.0
    assert word.y == pytest.approx(100.0 + word.y_speed)


def test_word_reaching_right_edge_ends_game():
    game = make_game(field_width=100)
    add_word(game, "alpha", x=99.5)
    game.update(0.0)
    assert game.game_over


def test_hit_word_past_edge_does_not_end_game():
    game = make_game(field_width=100)
    word = add_word(game, "beta", x=150.0)
    for char in "beta":
        game.type_char(char)
    game.update(0.0)
    assert word.speed == 0
    assert not game.game_over


def test_paused_update_does_not_move_or_spawn():
    game = make_game()
    word = add_word(game, "alpha", x=10.0)
    game.toggle_pause()
    game.update(5.0)
    assert word.x == 10.0
    assert len(game.falling) == 1