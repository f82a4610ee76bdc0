"""Law office ledger package.

Organized by feature modules (employees, cases, payroll, clients, ...) with a
thin Flask controller layer over service/repository layers.
"""
