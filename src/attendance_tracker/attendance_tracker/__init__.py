"""Attendance Tracker package.

A thin Flask render surface over a per-session attendance draft. Organized by
feature modules (students, attendance, notifications) with HTTP gateways to
the backend REST API behind small protocols.
"""
