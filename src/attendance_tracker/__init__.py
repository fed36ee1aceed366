"""Attendance Tracker package.

Organized by feature modules (subjects, timetable, attendance, statistics,
projection, persistence) with a thin Flask controller layer over plain
service objects that own no I/O of their own.
"""
