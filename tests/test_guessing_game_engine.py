import random

import pytest

from guessing_game_engine import guessing_game_engine, TOO_SMALL, TOO_BIG, WIN


def new_game(magic_number=None, rng=None):
    engine_object = guessing_game_engine(rng=rng)
    engine_object.initialize_game(magic_number)
    return engine_object


def test_magic_number_is_in_range():
    for seed in range(200):
        engine_object = new_game(rng=random.Random(seed))
        assert 1 <= engine_object.get_magic_number() <= 100


def test_range_is_one_to_one_hundred():
    engine_object = guessing_game_engine()
    assert engine_object.get_min() == 1
    assert engine_object.get_max() == 100


def test_magic_number_can_only_be_set_once():
    engine_object = new_game(42)

    with pytest.raises(RuntimeError):
        engine_object.initialize_game()

    with pytest.raises(RuntimeError):
        engine_object.initialize_game(7)

    assert engine_object.get_magic_number() == 42
    assert not hasattr(engine_object, "set_magic_number")


def test_compare_before_initialize_fails():
    with pytest.raises(RuntimeError):
        guessing_game_engine().compare_guess(5)


@pytest.mark.parametrize("magic_number", [1, 37, 50, 100])
def test_only_the_magic_number_wins(magic_number):
    engine_object = new_game(magic_number)

    for guess in range(-10, 111):
        outcome = engine_object.compare_guess(guess)

        if guess < magic_number:
            assert outcome == TOO_SMALL
        elif guess > magic_number:
            assert outcome == TOO_BIG
        else:
            assert outcome == WIN

    assert engine_object.get_magic_number() == magic_number


def test_guess_count():
    engine_object = new_game(50)

    engine_object.compare_guess(10)
    engine_object.compare_guess(90)
    engine_object.compare_guess(50)

    assert engine_object.get_user_guess_count() == 3


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("  42  \n", 42),
    ("\t7\r\n", 7),
    ("0", 0),
    ("4294967295", 4294967295),
    ("+8", 8),
    ("1000", 1000),
    ("007", 7),
])
def test_parse_guess(text, expected):
    assert guessing_game_engine().parse_guess(text) == expected


@pytest.mark.parametrize("text", [
    "",
    "\n",
    "abc",
    "3.5",
    "1_000",
    "4 2",
    "0x10",
    "--1",
    "-5",
    "-0",
    "4294967296",
    "99999999999999999999",
    "٣",
    "12abc",
])
def test_parse_guess_rejects(text):
    assert guessing_game_engine().parse_guess(text) is None
