"""Compensation System package.

This package is organized by feature modules (employees, compensation, hours,
payroll, reporting) with a thin Flask controller layer and SOLID
service/repository layers.
"""
