"""Payroll Ledger package.

Feature modules (employees, attendance, ledgers, payroll, users, checkins,
company) each keep a thin Flask controller on top of service/repository
layers; reports builds the spreadsheet exports.
"""
