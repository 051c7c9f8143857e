"""Staff Attendance package.

This package is organized by feature modules (staff, attendance, reports, ...)
with a thin Flask controller layer over service/repository layers and a
per-session in-memory store.
"""
