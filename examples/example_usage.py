"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.law_office.law_office.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, permissions_file=settings.PERMISSIONS_FILE)
    try:
        report = container.payroll_service.build_report(current_role="admin")
        for line in report.lines:
            print(f"{line.name:<20} cases={line.case_count} total={line.total_compensation}")
        print(report.summary)
    finally:
        container.close()


if __name__ == "__main__":
    main()
