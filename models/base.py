from pydantic import BaseModel, ConfigDict
from typing import Any, Dict


class BaseGolfModel(BaseModel):
    """Shared configuration and methods."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    def to_storage(self) -> Dict[str, Any]:
        """Dump using the persisted (camelCase) field names."""
        return self.model_dump(by_alias=True)
