import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    num_questions: int = int(os.getenv("NUM_QUESTIONS", "10"))
    max_answer_length: int = int(os.getenv("MAX_ANSWER_LENGTH", "4"))
    default_difficulty: str = os.getenv("DEFAULT_DIFFICULTY", "easy").lower()
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    random_seed: int | None = int(os.environ["RANDOM_SEED"]) if os.getenv("RANDOM_SEED") else None

settings = Settings()
