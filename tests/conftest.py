from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.law_office.law_office.access.policy import PermissionPolicy, load_policy
from src.law_office.law_office.appointments.model import Appointment
from src.law_office.law_office.appointments.service import AppointmentService
from src.law_office.law_office.cases.model import Case
from src.law_office.law_office.cases.service import CaseService
from src.law_office.law_office.catalog.model import ServiceOffering
from src.law_office.law_office.catalog.service import CatalogService
from src.law_office.law_office.clients.model import Client
from src.law_office.law_office.clients.service import ClientService
from src.law_office.law_office.container import Container
from src.law_office.law_office.core.enums import EmployeeStatus
from src.law_office.law_office.employees.model import Employee
from src.law_office.law_office.employees.service import EmployeeService
from src.law_office.law_office.payroll.service import PayrollService
from src.law_office.law_office.users.model import User
from src.law_office.law_office.users.service import AuthService

PERMISSIONS_FILE = Path(__file__).resolve().parents[1] / "config" / "permissions.json"


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class InMemoryEmployees:
    def __init__(self):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def create(self, *, name, role, salary, commission, hire_date, status) -> int:
        eid = self._next_id
        self._next_id += 1
        self._rows[eid] = Employee(
            employee_id=eid,
            name=name,
            role=role,
            salary=salary,
            commission=commission,
            hire_date=hire_date,
            status=status,
        )
        return eid

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        current = self._rows.get(int(employee_id))
        if not current:
            return False
        self._rows[int(employee_id)] = replace(current, **dict(changes))
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._rows.pop(int(employee_id), None) is not None

    def list_all(self):
        return sorted(self._rows.values(), key=lambda e: (e.name, e.employee_id))

    def list_by_status(self, status: EmployeeStatus):
        return [e for e in self.list_all() if e.status == status]


class InMemoryCases:
    def __init__(self):
        self._rows: dict[int, Case] = {}
        self._next_id = 1

    def get_by_id(self, case_id: int) -> Optional[Case]:
        return self._rows.get(int(case_id))

    def create(
        self, *, client, case_type, employee_id, employee_name, fee, expense, status, description, week, created_at
    ) -> int:
        cid = self._next_id
        self._next_id += 1
        self._rows[cid] = Case(
            case_id=cid,
            client=client,
            case_type=case_type,
            employee_id=employee_id,
            employee_name=employee_name,
            fee=fee,
            expense=expense,
            status=status,
            week=week,
            created_at=created_at,
            updated_at=created_at,
            description=description,
        )
        return cid

    def set_status(self, case_id: int, *, status: str, updated_at: datetime) -> bool:
        current = self._rows.get(int(case_id))
        if not current:
            return False
        self._rows[int(case_id)] = replace(current, status=status, updated_at=updated_at)
        return True

    def delete_by_id(self, case_id: int) -> bool:
        return self._rows.pop(int(case_id), None) is not None

    def list_by_week(self, week: str):
        items = [c for c in self._rows.values() if c.week == week]
        items.sort(key=lambda c: (c.created_at, c.case_id), reverse=True)
        return items

    def list_weeks(self):
        return sorted({c.week for c in self._rows.values()}, reverse=True)


class InMemoryPayrollSource:
    def __init__(self, employees: InMemoryEmployees, cases: InMemoryCases):
        self._employees = employees
        self._cases = cases
        self.calls = 0

    def snapshot(self, week: str):
        self.calls += 1
        return self._employees.list_by_status(EmployeeStatus.ACTIVE), self._cases.list_by_week(week)

    def performance_snapshot(self):
        self.calls += 1
        totals: dict[int, tuple[int, int]] = {}
        for week in self._cases.list_weeks():
            for case in self._cases.list_by_week(week):
                handled, revenue = totals.get(case.employee_id, (0, 0))
                totals[case.employee_id] = (handled + 1, revenue + case.fee)
        return self._employees.list_by_status(EmployeeStatus.ACTIVE), totals


class InMemoryClients:
    def __init__(self):
        self._rows: dict[int, Client] = {}

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self._rows.get(int(client_id))

    def create(self, *, created_at, **fields) -> int:
        cid = len(self._rows) + 1
        self._rows[cid] = Client(client_id=cid, created_at=created_at, **fields)
        return cid

    def list_all(self):
        return sorted(self._rows.values(), key=lambda c: (c.created_at, c.client_id), reverse=True)


class InMemoryAppointments:
    def __init__(self, clients: InMemoryClients):
        self._clients = clients
        self._rows: dict[int, Appointment] = {}

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        row = self._rows.get(int(appointment_id))
        if not row:
            return None
        client = self._clients.get_by_id(row.client_id)
        return replace(
            row,
            client_last_name=client.last_name if client else None,
            client_first_name=client.first_name if client else None,
        )

    def create(self, **fields) -> int:
        aid = len(self._rows) + 1
        self._rows[aid] = Appointment(appointment_id=aid, **fields)
        return aid

    def list_all(self):
        items = [self.get_by_id(aid) for aid in self._rows]
        return sorted(items, key=lambda a: (a.scheduled_at, a.appointment_id))


class InMemoryCatalog:
    def __init__(self, offerings):
        self._offerings = list(offerings)

    def list_all(self):
        return sorted(self._offerings, key=lambda s: s.type)


class InMemoryUsers:
    def __init__(self, users):
        self._by_username = {u.username: u for u in users}
        self.logins: list[int] = []

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)

    def touch_last_login(self, user_id: int) -> None:
        self.logins.append(user_id)


@pytest.fixture
def clock() -> FakeClock:
    # Wednesday 2025-01-01 falls in ISO week 2025-W01.
    return FakeClock(datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def policy() -> PermissionPolicy:
    return load_policy(PERMISSIONS_FILE)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def cases_repo() -> InMemoryCases:
    return InMemoryCases()


@pytest.fixture
def employee_service(employees_repo, policy, clock) -> EmployeeService:
    return EmployeeService(employees_repo, policy, clock=clock)


@pytest.fixture
def case_service(cases_repo, employees_repo, policy, clock) -> CaseService:
    return CaseService(cases_repo, employees_repo, policy, clock=clock)


@pytest.fixture
def clients_repo() -> InMemoryClients:
    return InMemoryClients()


@pytest.fixture
def payroll_source(employees_repo, cases_repo) -> InMemoryPayrollSource:
    return InMemoryPayrollSource(employees_repo, cases_repo)


@pytest.fixture
def payroll_service(payroll_source, policy, clock) -> PayrollService:
    return PayrollService(payroll_source, policy, clock=clock)


@pytest.fixture
def marie(employees_repo) -> Employee:
    eid = employees_repo.create(
        name="Marie Dubois",
        role="Associé Senior",
        salary=8000,
        commission=30,
        hire_date=date(2023, 1, 15),
        status=EmployeeStatus.ACTIVE,
    )
    return employees_repo.get_by_id(eid)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers(
        [
            User(user_id=1, username="admin", password_hash=generate_password_hash("admin123"), role="admin"),
            User(user_id=2, username="sophie", password_hash=generate_password_hash("junior1"), role="Avocat Junior"),
            User(
                user_id=3,
                username="gone",
                password_hash=generate_password_hash("gone123"),
                role="Avocat",
                is_active=False,
            ),
        ]
    )


@pytest.fixture
def container(
    policy, clock, users_repo, clients_repo, cases_repo, employee_service, case_service, payroll_service
) -> Container:
    catalog = InMemoryCatalog(
        [
            ServiceOffering(service_id=1, type="Divorce", hourly_rate=200, commission=20, flat_fee="2500€"),
            ServiceOffering(service_id=2, type="Consultation", hourly_rate=150, commission=20, flat_fee="-"),
        ]
    )
    return Container(
        policy=policy,
        auth_service=AuthService(users_repo),
        employee_service=employee_service,
        case_service=case_service,
        payroll_service=payroll_service,
        client_service=ClientService(clients_repo, policy, clock=clock),
        catalog_service=CatalogService(catalog, policy),
        appointment_service=AppointmentService(
            InMemoryAppointments(clients_repo), clients_repo, cases_repo, policy, clock=clock
        ),
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.law_office.law_office.main import create_app

    return create_app(container)


@pytest.fixture
def http(app):
    return app.test_client()
