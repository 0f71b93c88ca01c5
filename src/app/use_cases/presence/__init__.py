from .dtos import PresenceResponse
from .presence_use_cases import GetPresenceUseCase, RecordHeartbeatUseCase

__all__ = ["RecordHeartbeatUseCase", "GetPresenceUseCase", "PresenceResponse"]
