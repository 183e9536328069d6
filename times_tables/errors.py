class TimesTablesError(Exception):
    """Base class for errors raised by the game's operations."""
    detail = "times_tables_error"

class UnknownDifficultyError(TimesTablesError, ValueError):
    detail = "unknown_difficulty"

class InvalidKeyError(TimesTablesError, ValueError):
    detail = "invalid_key"
