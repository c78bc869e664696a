"""KBM Records package.

Attendance and records management for a youth-education program, organized
by feature modules (users, students, reports, attendance, materials) with a
thin Flask controller layer over service/repository layers.
"""
