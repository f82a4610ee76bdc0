from datetime import datetime

import pytest

from src.law_office.law_office.core.exceptions import PermissionDenied, ValidationError


@pytest.fixture
def appointment_service(container):
    return container.appointment_service


@pytest.fixture
def lambert(container):
    return container.client_service.create_client(current_role="admin", last_name="Lambert", first_name="Paul")


def test_create_appointment_defaults(appointment_service, lambert):
    appt = appointment_service.create_appointment(
        current_role="Secrétaire",
        client_id=lambert.client_id,
        title="  Premier rendez-vous ",
        scheduled_at="2025-01-03T14:30:00+01:00",
    )

    assert appt.title == "Premier rendez-vous"
    assert appt.scheduled_at == datetime(2025, 1, 3, 13, 30)
    assert appt.duration_minutes == 60
    assert appt.status == "planned"
    assert appt.case_id is None
    assert (appt.client_last_name, appt.client_first_name) == ("Lambert", "Paul")


def test_appointments_listed_soonest_first(appointment_service, case_service, lambert, marie):
    case = case_service.create_case(
        current_role="admin", client="Lambert", case_type="Divorce", employee_id=marie.employee_id, fee=2500
    )
    for when in ("2025-02-01T09:00", "2025-01-10T16:00"):
        appointment_service.create_appointment(
            current_role="admin", client_id=lambert.client_id, title="RDV", scheduled_at=when, case_id=case.case_id
        )

    listed = appointment_service.list_appointments(current_role="Stagiaire")

    assert [a.scheduled_at.month for a in listed] == [1, 2]
    assert {a.case_id for a in listed} == {case.case_id}


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"scheduled_at": "tomorrow"},
        {"scheduled_at": None},
        {"duration_minutes": 0},
        {"duration_minutes": -30},
        {"client_id": 99},
        {"case_id": 42},
    ],
)
def test_create_appointment_rejects_bad_input(appointment_service, lambert, overrides):
    fields = dict(current_role="admin", client_id=lambert.client_id, title="RDV", scheduled_at="2025-01-10T16:00")
    fields.update(overrides)

    with pytest.raises(ValidationError):
        appointment_service.create_appointment(**fields)


def test_appointments_are_gated(appointment_service, lambert):
    with pytest.raises(PermissionDenied):
        appointment_service.create_appointment(
            current_role="Stagiaire", client_id=lambert.client_id, title="RDV", scheduled_at="2025-01-10T16:00"
        )
    with pytest.raises(PermissionDenied):
        appointment_service.list_appointments(current_role="Concierge")
