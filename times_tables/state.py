import logging
import random
import threading
from typing import Callable, List, Optional
from .models import (
	AnswerOutcome,
	CompletionMessage,
	Difficulty,
	FeedbackColor,
	GameSnapshot,
	KeypadButton,
	KeypadButtonKind,
)
from .errors import InvalidKeyError
from .services.keypad import is_digit, parse_answer
from .services.problem_engine import bounds_for, draw_operands, random_color, to_difficulty
from .config import settings

logger = logging.getLogger("times_tables")

CORRECT_TEXT = "Correct!"
INCORRECT_TEXT = "Please try again"
BLANK_FEEDBACK = " "

class GameState:
	def __init__(self, rng: Optional[random.Random] = None, num_questions: Optional[int] = None, difficulty: Difficulty | str | None = None) -> None:
		self.rng = rng or random.Random(settings.random_seed)
		self.num_questions = num_questions if num_questions is not None else settings.num_questions
		self.difficulty = to_difficulty(difficulty or settings.default_difficulty)
		self.lower_bound, self.upper_bound = bounds_for(self.difficulty)
		self.num1 = 0
		self.num2 = 0
		self.num_correct = 0
		self.session_complete = False
		self.feedback_text = BLANK_FEEDBACK
		self.feedback_color = FeedbackColor.neutral
		self.color1 = self.color2 = self.color_x = "#000000"
		self.generate_problem()

	@property
	def product(self) -> int:
		return self.num1 * self.num2

	@property
	def score(self) -> str:
		return f"{self.num_correct}/{self.num_questions}"

	def generate_problem(self) -> None:
		self.num1, self.num2 = draw_operands(self.rng, self.lower_bound, self.upper_bound)
		self.color1 = random_color(self.rng)
		self.color2 = random_color(self.rng)
		self.color_x = random_color(self.rng)
		logger.debug({"event": "problem_generated", "num1": self.num1, "num2": self.num2, "difficulty": self.difficulty.value})

	def set_difficulty(self, difficulty: Difficulty | str) -> None:
		# current problem and score are left alone; only later draws use the new range
		self.difficulty = to_difficulty(difficulty)
		self.lower_bound, self.upper_bound = bounds_for(self.difficulty)
		logger.debug({"event": "difficulty_changed", "difficulty": self.difficulty.value, "lower_bound": self.lower_bound, "upper_bound": self.upper_bound})

	def set_feedback(self, text: str, color: FeedbackColor) -> None:
		self.feedback_text = text
		self.feedback_color = color

	def reset(self) -> None:
		self.num_correct = 0
		self.session_complete = False
		self.set_feedback(BLANK_FEEDBACK, FeedbackColor.neutral)
		self.generate_problem()
		logger.debug({"event": "session_reset", "difficulty": self.difficulty.value})

	def record_answer(self, is_correct: bool) -> AnswerOutcome:
		if not is_correct:
			return AnswerOutcome.incorrect
		if self.session_complete:
			return AnswerOutcome.correct
		self.num_correct += 1
		if self.num_correct >= self.num_questions:
			self.session_complete = True
			logger.info({"event": "session_complete", "score": self.score})
		else:
			self.generate_problem()
		return AnswerOutcome.correct

class InputController:
	def __init__(self, game: GameState, max_length: Optional[int] = None) -> None:
		self.game = game
		self.max_length = max_length if max_length is not None else settings.max_answer_length
		self.buffer = ""

	def append_digit(self, digit: str) -> None:
		if not is_digit(digit):
			raise InvalidKeyError(f"not a keypad digit: {digit!r}")
		if len(self.buffer) < self.max_length:
			self.buffer += digit

	def delete_last(self) -> None:
		self.buffer = self.buffer[:-1]

	def submit(self) -> Optional[AnswerOutcome]:
		answer = parse_answer(self.buffer)
		typed = self.buffer
		self.buffer = ""
		if answer is None:
			logger.debug({"event": "submit_ignored", "buffer": typed})
			return None
		is_correct = answer == self.game.product
		if is_correct:
			self.game.set_feedback(CORRECT_TEXT, FeedbackColor.success)
		else:
			self.game.set_feedback(INCORRECT_TEXT, FeedbackColor.failure)
		logger.debug({
			"event": "answer_submitted",
			"num1": self.game.num1,
			"num2": self.game.num2,
			"answer": answer,
			"is_correct": is_correct,
			"score": self.game.score,
		})
		return self.game.record_answer(is_correct)

	def press(self, button: KeypadButton) -> Optional[AnswerOutcome]:
		if button.kind == KeypadButtonKind.number:
			self.append_digit(button.digit)
		elif button.kind == KeypadButtonKind.delete:
			self.delete_last()
		else:
			return self.submit()
		return None

Listener = Callable[[GameSnapshot], None]

class GameController:
	def __init__(self, game: Optional[GameState] = None, max_length: Optional[int] = None) -> None:
		self.game = game or GameState()
		self.input = InputController(self.game, max_length=max_length)
		self._listeners: List[Listener] = []
		self._lock = threading.Lock()

	def snapshot(self) -> GameSnapshot:
		game = self.game
		completion = None
		if game.session_complete:
			completion = CompletionMessage(
				title="Congratulations!",
				body=f"You've completed all {game.num_questions} questions!",
				action="Play Again",
			)
		return GameSnapshot(
			num1=game.num1,
			num2=game.num2,
			buffer=self.input.buffer,
			display_answer=self.input.buffer or "?",
			feedback_text=game.feedback_text,
			feedback_color=game.feedback_color,
			score=game.score,
			num_correct=game.num_correct,
			num_questions=game.num_questions,
			difficulty=game.difficulty,
			lower_bound=game.lower_bound,
			upper_bound=game.upper_bound,
			session_complete=game.session_complete,
			color1=game.color1,
			color2=game.color2,
			color_x=game.color_x,
			completion=completion,
		)

	def subscribe(self, listener: Listener) -> Callable[[], None]:
		self._listeners.append(listener)
		def _unsubscribe() -> None:
			if listener in self._listeners:
				self._listeners.remove(listener)
		return _unsubscribe

	def _notify(self) -> GameSnapshot:
		snap = self.snapshot()
		for listener in list(self._listeners):
			try:
				listener(snap)
			except Exception:
				logger.exception("state_listener_failed")
		return snap

	def press_digit(self, digit: str) -> GameSnapshot:
		with self._lock:
			self.input.append_digit(digit)
			return self._notify()

	def delete(self) -> GameSnapshot:
		with self._lock:
			self.input.delete_last()
			return self._notify()

	def submit(self) -> tuple[Optional[AnswerOutcome], GameSnapshot]:
		with self._lock:
			outcome = self.input.submit()
			return outcome, self._notify()

	def press(self, button: KeypadButton) -> tuple[Optional[AnswerOutcome], GameSnapshot]:
		with self._lock:
			outcome = self.input.press(button)
			return outcome, self._notify()

	def set_difficulty(self, difficulty: Difficulty | str) -> GameSnapshot:
		with self._lock:
			self.game.set_difficulty(difficulty)
			return self._notify()

	def reset(self) -> GameSnapshot:
		with self._lock:
			self.game.reset()
			return self._notify()

game_controller = GameController()
