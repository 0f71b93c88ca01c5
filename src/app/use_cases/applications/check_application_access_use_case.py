"""
Check Application Access Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import ApplicationAccessResponse
from .gate import evaluate_gate


class CheckApplicationAccessUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, property_id: UUID) -> Result[ApplicationAccessResponse]:
        async with self.uow:
            decision = await evaluate_gate(self.uow, tenant_id, property_id, utcnow())

            if decision.via_viewing:
                return Return.ok(ApplicationAccessResponse(can_apply=True, via="viewing"))
            if decision.invite is not None:
                return Return.ok(
                    ApplicationAccessResponse(
                        can_apply=True, via="invite", invite_id=str(decision.invite.id)
                    )
                )
            return Return.ok(ApplicationAccessResponse(can_apply=False))
