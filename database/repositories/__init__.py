from database.repositories.round_repo import DEFAULT_STORAGE_KEY, RoundRepository

__all__ = ["DEFAULT_STORAGE_KEY", "RoundRepository"]
