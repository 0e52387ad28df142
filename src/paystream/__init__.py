"""PayStream payroll package.

Organized by feature modules (employees, payroll, ledger, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
