from .round_entry import RoundEntryService, SubmissionResult

__all__ = ["RoundEntryService", "SubmissionResult"]
