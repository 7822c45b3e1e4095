"""
User related data models
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class User:
    """Lightweight customer record kept on the device"""
    user_id: str
    email: str
    name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Restore from a persisted record (older app builds stored id/createdAt)"""
        return cls(
            user_id=data.get("user_id") or data["id"],
            email=data.get("email", ""),
            name=data.get("name"),
            created_at=data.get("created_at") or data.get("createdAt"),
            updated_at=data.get("updated_at") or data.get("updatedAt")
        )
