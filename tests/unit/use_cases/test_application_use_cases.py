from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.services.exceptions import ExternalServiceError
from src.app.use_cases.applications import (
    CheckApplicationAccessUseCase,
    RecordCreditCheckResultUseCase,
    RequestCreditCheckUseCase,
    ScreeningInput,
    SubmitApplicationUseCase,
    UpdateApplicationStatusUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import (
    ApplicationInvite,
    ApplicationStatus,
    InviteStatus,
    ViewingStatus,
)


def screening(**overrides):
    values = dict(
        first_name="Ada",
        last_name="Obi",
        employment_status="employed",
        net_monthly_income="450000",
        screening_consent=True,
        documents=[{"title": "Payslip", "path": "docs/payslip.pdf"}],
    )
    values.update(overrides)
    return ScreeningInput(**values)


def live_invite(tenant_id, property_id, landlord_id=None):
    return ApplicationInvite(
        id=uuid4(),
        token="tok",
        property_id=property_id,
        landlord_id=landlord_id or uuid4(),
        tenant_id=tenant_id,
        status=InviteStatus.invited,
        expires_at=utcnow() + timedelta(days=1),
    )


def grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id, landlord_id=None):
    viewing = make_viewing(
        tenant_id=tenant_id,
        property_id=property_id,
        landlord_id=landlord_id or uuid4(),
        status=ViewingStatus.completed,
        application_sent=True,
    )
    mock_uow.viewings.get_application_access.return_value = viewing
    return viewing


# ============================================================================
# Gate
# ============================================================================


@pytest.mark.asyncio
async def test_gate_denies_without_viewing_or_invite(mock_uow):
    result = await CheckApplicationAccessUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_ok()
    assert result.value.can_apply is False


@pytest.mark.asyncio
async def test_gate_allows_after_application_sent(mock_uow, make_viewing):
    tenant_id, property_id = uuid4(), uuid4()
    grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id)

    result = await CheckApplicationAccessUseCase(mock_uow).execute(tenant_id, property_id)

    assert result.value.can_apply is True
    assert result.value.via == "viewing"


@pytest.mark.asyncio
async def test_gate_consults_invites_before_denying(mock_uow):
    tenant_id, property_id = uuid4(), uuid4()
    invite = live_invite(tenant_id, property_id)
    mock_uow.invites.get_live_for_pair.return_value = invite

    result = await CheckApplicationAccessUseCase(mock_uow).execute(tenant_id, property_id)

    assert result.value.can_apply is True
    assert result.value.via == "invite"
    assert result.value.invite_id == str(invite.id)


# ============================================================================
# Submit
# ============================================================================


@pytest.mark.asyncio
async def test_gate_rejection_happens_before_any_write(mock_uow):
    result = await SubmitApplicationUseCase(mock_uow).execute(
        uuid4(), uuid4(), uuid4(), screening()
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_GATE_DENIED"
    mock_uow.screening_profiles.upsert.assert_not_called()
    mock_uow.screening_profiles.mark_tenant_screened.assert_not_called()
    mock_uow.applications.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_consent_required(mock_uow):
    result = await SubmitApplicationUseCase(mock_uow).execute(
        uuid4(), uuid4(), uuid4(), screening(screening_consent=False)
    )

    assert result.is_err()
    assert result.error.code == "SCREENING_CONSENT_REQUIRED"
    mock_uow.__aenter__.assert_not_called()


@pytest.mark.asyncio
async def test_submit_via_viewing(mock_uow, notifier, make_viewing):
    tenant_id, property_id, landlord_id = uuid4(), uuid4(), uuid4()
    grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id, landlord_id)

    result = await SubmitApplicationUseCase(mock_uow, notifier).execute(
        tenant_id, property_id, landlord_id, screening()
    )

    assert result.is_ok()
    assert result.value.status == "submitted"
    assert result.value.invite_id is None
    assert result.value.landlord_id == str(landlord_id)

    profile = mock_uow.screening_profiles.upsert.call_args.args[0]
    assert profile.user_id == tenant_id
    assert profile.documents == [{"title": "Payslip", "path": "docs/payslip.pdf"}]
    assert profile.screening_consent_date is not None
    mock_uow.screening_profiles.mark_tenant_screened.assert_awaited_once_with(tenant_id)
    mock_uow.invites.mark_used.assert_not_called()
    assert notifier.notify.call_args.args[0] == landlord_id


@pytest.mark.asyncio
async def test_landlord_not_granting_access_is_rejected(mock_uow, make_viewing):
    tenant_id, property_id = uuid4(), uuid4()
    grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id)

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, uuid4(), screening()
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_GATE_DENIED"
    mock_uow.applications.create.assert_not_called()
    mock_uow.screening_profiles.upsert.assert_not_called()


@pytest.mark.asyncio
async def test_landlord_taken_from_invite_when_omitted(mock_uow, notifier):
    tenant_id, property_id, landlord_id = uuid4(), uuid4(), uuid4()
    mock_uow.invites.get_live_for_pair.return_value = live_invite(
        tenant_id, property_id, landlord_id
    )

    result = await SubmitApplicationUseCase(mock_uow, notifier).execute(
        tenant_id, property_id, None, screening()
    )

    assert result.is_ok()
    assert result.value.landlord_id == str(landlord_id)
    assert mock_uow.applications.create.call_args.args[0].landlord_id == landlord_id
    assert notifier.notify.call_args.args[0] == landlord_id


@pytest.mark.asyncio
async def test_submit_via_invite_consumes_it(mock_uow):
    tenant_id, property_id = uuid4(), uuid4()
    invite = live_invite(tenant_id, property_id)
    mock_uow.invites.get_live_for_pair.return_value = invite

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, invite.landlord_id, screening()
    )

    assert result.is_ok()
    assert result.value.invite_id == str(invite.id)
    assert mock_uow.invites.mark_used.call_args.args[0] == invite.id


@pytest.mark.asyncio
async def test_losing_invite_race_denies_without_viewing(mock_uow):
    tenant_id, property_id = uuid4(), uuid4()
    mock_uow.invites.get_live_for_pair.return_value = live_invite(tenant_id, property_id)
    mock_uow.invites.mark_used.return_value = False

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, None, screening()
    )

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_USED"
    mock_uow.applications.create.assert_not_called()


@pytest.mark.asyncio
async def test_explicit_expired_invite(mock_uow):
    tenant_id, property_id = uuid4(), uuid4()
    invite = live_invite(tenant_id, property_id)
    invite.expires_at = utcnow() - timedelta(minutes=1)
    mock_uow.invites.get_by_id.return_value = invite

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, None, screening(), invite_id=invite.id
    )

    assert result.is_err()
    assert result.error.code == "INVITE_EXPIRED"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "previous_status",
    [
        ApplicationStatus.pending,
        ApplicationStatus.submitted,
        ApplicationStatus.pending_credit_check,
        ApplicationStatus.declined,
    ],
)
async def test_resubmission_supersedes_previous(
    mock_uow, make_application, make_viewing, previous_status
):
    tenant_id, property_id = uuid4(), uuid4()
    previous = make_application(
        tenant_id=tenant_id, property_id=property_id, status=previous_status
    )
    grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id)
    mock_uow.applications.get_active_for_pair.return_value = previous

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, None, screening()
    )

    assert result.is_ok()
    superseded_id, replacement_id, _ = mock_uow.applications.supersede.call_args.args
    assert superseded_id == previous.id
    assert str(replacement_id) == result.value.id
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_accepted_application_blocks_resubmission(mock_uow, make_application, make_viewing):
    tenant_id, property_id = uuid4(), uuid4()
    grant_viewing_access(mock_uow, make_viewing, tenant_id, property_id)
    mock_uow.applications.get_active_for_pair.return_value = make_application(
        tenant_id=tenant_id, property_id=property_id, status=ApplicationStatus.accepted
    )

    result = await SubmitApplicationUseCase(mock_uow).execute(
        tenant_id, property_id, None, screening()
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_ALREADY_ACCEPTED"
    mock_uow.screening_profiles.upsert.assert_not_called()
    mock_uow.applications.supersede.assert_not_called()


# ============================================================================
# Credit check request
# ============================================================================


@pytest.mark.asyncio
async def test_credit_check_accepted_moves_to_pending_check(mock_uow):
    credit_checks = AsyncMock()
    application_id, tenant_id = uuid4(), uuid4()

    result = await RequestCreditCheckUseCase(mock_uow, credit_checks).execute(
        application_id, tenant_id
    )

    assert result.is_ok()
    assert result.value is True
    credit_checks.request_check.assert_awaited_once_with(application_id, tenant_id)
    args = mock_uow.applications.transition.call_args.args
    assert args[0] == application_id
    assert args[1] == [ApplicationStatus.submitted]
    assert args[2] == ApplicationStatus.pending_credit_check
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_credit_check_failure_leaves_application_submitted(mock_uow):
    credit_checks = AsyncMock()
    credit_checks.request_check.side_effect = ExternalServiceError("credit_check", "503")

    result = await RequestCreditCheckUseCase(mock_uow, credit_checks).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "EXTERNAL_SERVICE_FAILURE"
    mock_uow.applications.transition.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_credit_check_after_landlord_decision_is_noop(mock_uow):
    mock_uow.applications.transition.return_value = False

    result = await RequestCreditCheckUseCase(mock_uow, AsyncMock()).execute(uuid4(), uuid4())

    assert result.is_ok()
    assert result.value is False
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


# ============================================================================
# Landlord decision and credit check callback
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "current",
    [ApplicationStatus.pending, ApplicationStatus.submitted, ApplicationStatus.pending_credit_check],
)
async def test_landlord_can_decide_open_application(mock_uow, notifier, make_application, current):
    application = make_application(status=current)
    decided = make_application(
        id=application.id,
        tenant_id=application.tenant_id,
        landlord_id=application.landlord_id,
        status=ApplicationStatus.accepted,
    )
    mock_uow.applications.get_by_id.side_effect = [application, decided]

    result = await UpdateApplicationStatusUseCase(mock_uow, notifier).execute(
        application.id, application.landlord_id, ApplicationStatus.accepted
    )

    assert result.is_ok()
    assert result.value.status == "accepted"
    assert notifier.notify.call_args.args[0] == application.tenant_id
    assert notifier.notify.call_args.args[1] == "application_status_changed"


@pytest.mark.asyncio
@pytest.mark.parametrize("current", [ApplicationStatus.accepted, ApplicationStatus.declined])
async def test_decided_application_is_final(mock_uow, make_application, current):
    application = make_application(status=current)
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.return_value = False

    result = await UpdateApplicationStatusUseCase(mock_uow).execute(
        application.id, application.landlord_id, ApplicationStatus.declined
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_FINALIZED"


@pytest.mark.asyncio
async def test_other_landlord_sees_not_found(mock_uow, make_application):
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application

    result = await UpdateApplicationStatusUseCase(mock_uow).execute(
        application.id, uuid4(), ApplicationStatus.accepted
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_only_accept_or_decline(mock_uow):
    result = await UpdateApplicationStatusUseCase(mock_uow).execute(
        uuid4(), uuid4(), ApplicationStatus.pending
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "passed,expected", [(True, ApplicationStatus.pending), (False, ApplicationStatus.declined)]
)
async def test_credit_check_result(mock_uow, make_application, passed, expected):
    application = make_application(status=ApplicationStatus.pending_credit_check)
    mock_uow.applications.get_by_id.side_effect = [
        application,
        make_application(id=application.id, status=expected),
    ]

    result = await RecordCreditCheckResultUseCase(mock_uow).execute(application.id, passed)

    assert result.is_ok()
    assert result.value.status == expected.value
    assert mock_uow.applications.transition.call_args.args[2] == expected


@pytest.mark.asyncio
async def test_credit_check_replay_is_noop(mock_uow, make_application):
    application = make_application(status=ApplicationStatus.pending)
    mock_uow.applications.get_by_id.return_value = application

    result = await RecordCreditCheckResultUseCase(mock_uow).execute(application.id, True)

    assert result.is_ok()
    mock_uow.applications.transition.assert_not_called()
    mock_uow.commit.assert_not_called()
