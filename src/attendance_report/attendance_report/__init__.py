"""Attendance Report package.

Reconciles biometric clock-in exports against an employee roster and a
holiday calendar. Organized by feature modules (attendance, users,
schedules, reports, sources) with a thin Flask controller layer on top of
plain service classes.
"""
