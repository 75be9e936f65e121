"""StaffTrack package.

HR administration backend organized by feature modules (employees, attendance,
leaves, performance, reports) with a thin Flask controller layer on top of
service/repository layers.
"""
