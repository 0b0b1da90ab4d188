"""Salon CRM payroll package.

This package is organized by feature modules (employees, work_sessions,
holidays, payroll) with a thin Flask controller layer and service/repository
layers. Payroll arithmetic lives in pure functions under ``payroll`` and never
touches the database.
"""
