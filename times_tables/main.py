from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
from time import perf_counter
from .state import game_controller
from .models import (
	DifficultyRequest,
	DigitRequest,
	GameSnapshot,
	KeypadButton,
	KeypadLayoutResponse,
	PressRequest,
	SubmitResponse,
)
from .errors import TimesTablesError
from .services.keypad import keypad_labels
from .config import settings

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger("times_tables")

app = FastAPI(default_response_class=ORJSONResponse)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

def _reject(error: TimesTablesError) -> HTTPException:
	logger.debug({"event": "request_rejected", "detail": error.detail, "reason": str(error)})
	return HTTPException(status_code=422, detail=error.detail)

@app.on_event("startup")
def on_startup() -> None:
	logger.info({
		"event": "api_startup",
		"num_questions": settings.num_questions,
		"max_answer_length": settings.max_answer_length,
		"difficulty": game_controller.game.difficulty.value,
	})

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
	start = perf_counter()
	response = await call_next(request)
	duration_ms = int((perf_counter() - start) * 1000)
	logger.debug({
		"event": "request_timing",
		"method": request.method,
		"path": request.url.path,
		"status_code": response.status_code,
		"duration_ms": duration_ms,
	})
	return response

@app.get("/api/game", response_model=GameSnapshot)
def get_game():
	return game_controller.snapshot()

@app.get("/api/keypad", response_model=KeypadLayoutResponse)
def get_keypad():
	return KeypadLayoutResponse(rows=keypad_labels())

@app.post("/api/keypad/digit", response_model=GameSnapshot)
def press_digit(payload: DigitRequest):
	try:
		return game_controller.press_digit(payload.digit)
	except TimesTablesError as e:
		raise _reject(e)

@app.post("/api/keypad/delete", response_model=GameSnapshot)
def delete_digit():
	return game_controller.delete()

@app.post("/api/keypad/submit", response_model=SubmitResponse)
def submit_answer():
	outcome, snapshot = game_controller.submit()
	return SubmitResponse(outcome=outcome, game=snapshot)

@app.post("/api/keypad/press", response_model=SubmitResponse)
def press_button(payload: PressRequest):
	# single entry point for clients that forward raw keypad buttons
	try:
		outcome, snapshot = game_controller.press(KeypadButton.from_label(payload.button))
	except TimesTablesError as e:
		raise _reject(e)
	return SubmitResponse(outcome=outcome, game=snapshot)

@app.post("/api/difficulty", response_model=GameSnapshot)
def set_difficulty(payload: DifficultyRequest):
	try:
		return game_controller.set_difficulty(payload.difficulty)
	except TimesTablesError as e:
		raise _reject(e)

@app.post("/api/game/reset", response_model=GameSnapshot)
def reset_game():
	return game_controller.reset()
