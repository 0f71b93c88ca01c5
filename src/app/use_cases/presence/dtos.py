from typing import Optional

from pydantic import BaseModel


class PresenceResponse(BaseModel):
    user_id: str
    online: bool
    last_seen_at: Optional[str] = None
