"""QR timekeeping package.

Feature modules (attendance, payroll, sessions, ...) hold the domain rules;
a thin Flask controller layer exposes them over HTTP.
"""
