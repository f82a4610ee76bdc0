from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .access.policy import PermissionPolicy, load_policy
from .appointments.mysql_appointment_repository import MySQLAppointmentRepository
from .appointments.service import AppointmentService
from .cases.mysql_case_repository import MySQLCaseRepository
from .cases.service import CaseService
from .catalog.mysql_catalog_repository import MySQLCatalogRepository
from .catalog.service import CatalogService
from .clients.mysql_client_repository import MySQLClientRepository
from .clients.service import ClientService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .payroll.mysql_payroll_repository import MySQLPayrollSnapshotSource
from .payroll.service import PayrollService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    policy: PermissionPolicy

    auth_service: AuthService
    employee_service: EmployeeService
    case_service: CaseService
    payroll_service: PayrollService
    client_service: ClientService
    catalog_service: CatalogService
    appointment_service: AppointmentService

    conn: Optional[DatabaseConnection] = None

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_container(*, db_config: dict, permissions_file: str | Path) -> Container:
    policy = load_policy(permissions_file)
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).open()

    users_repo = MySQLUserRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    cases_repo = MySQLCaseRepository(conn)
    clients_repo = MySQLClientRepository(conn)
    catalog_repo = MySQLCatalogRepository(conn)
    payroll_source = MySQLPayrollSnapshotSource(conn)
    appointments_repo = MySQLAppointmentRepository(conn)

    return Container(
        policy=policy,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(employees_repo, policy),
        case_service=CaseService(cases_repo, employees_repo, policy),
        payroll_service=PayrollService(payroll_source, policy),
        client_service=ClientService(clients_repo, policy),
        catalog_service=CatalogService(catalog_repo, policy),
        appointment_service=AppointmentService(appointments_repo, clients_repo, cases_repo, policy),
        conn=conn,
    )
