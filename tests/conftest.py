import random

import pytest

from times_tables.state import GameController, GameState, InputController


@pytest.fixture
def game() -> GameState:
    state = GameState(rng=random.Random(1234), num_questions=10, difficulty="easy")
    state.num1, state.num2 = 3, 4
    return state


@pytest.fixture
def keypad(game: GameState) -> InputController:
    return InputController(game, max_length=4)


@pytest.fixture
def controller(game: GameState) -> GameController:
    return GameController(game, max_length=4)


def type_answer(keypad: InputController, answer: str) -> None:
    for ch in answer:
        keypad.append_digit(ch)
