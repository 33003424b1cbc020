"""Employee Payroll System package.

Feature modules (employees, payroll) with a thin Flask controller layer on top
of service and repository layers.
"""
