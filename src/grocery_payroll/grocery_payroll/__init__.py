"""Grocery Payroll Desk package.

This package is organized by feature modules (stores, employees, payroll checks,
blocked phones) with a thin Flask controller layer over service/repository layers.
Repositories talk to the external payroll backend over HTTP.
"""
