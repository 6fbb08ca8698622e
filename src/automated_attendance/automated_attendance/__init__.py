"""Automated Attendance admin client.

This package is organized by feature modules (auth, accounts, courses, ...)
with a thin Flask controller layer over services that talk to the attendance
REST API through repository interfaces.
"""
