"""User profile stored with the data file. Descriptive only."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class User:
    name: str = ""
    email_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "email_id": self.email_id}

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "User":
        data = data or {}
        return cls(
            name=str(data.get("name") or ""),
            email_id=str(data.get("email_id") or ""),
        )

    def __str__(self) -> str:
        return f"{{Name: {self.name}, EmailId: {self.email_id}}}"
