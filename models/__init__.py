from .base import BaseGolfModel
from .round import RoundRecord

__all__ = ["BaseGolfModel", "RoundRecord"]
