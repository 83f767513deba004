from . import health, students, tutors, emergency_contacts, groups, enrollments, payments, grades, dashboard

__all__ = [
    "health",
    "students",
    "tutors",
    "emergency_contacts",
    "groups",
    "enrollments",
    "payments",
    "grades",
    "dashboard",
]
