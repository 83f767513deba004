# school_admin/datasources/seed.py
"""Demo dataset for development against the in-memory store."""
from .memory import InMemoryStore
from ..models import EMERGENCY_CONTACTS, ENROLLMENTS, GRADES, GROUPS, PAYMENTS, STUDENTS, TUTORS

GRADE_CATALOG = [
    {"name": "Preescolar", "sections": ["A", "B"]},
    {"name": "Primero", "sections": ["A", "B", "C"]},
    {"name": "Segundo", "sections": ["A", "B", "C"]},
    {"name": "Tercero", "sections": ["A", "B"]},
    {"name": "Cuarto", "sections": ["A", "B"]},
    {"name": "Quinto", "sections": ["A", "B"]},
    {"name": "Sexto", "sections": ["A"]},
]

TUTOR_ROWS = [
    {
        "first_name": "María", "last_name": "García", "email": "maria.garcia@email.com",
        "phone": "987-654-3210", "address": "Calle 123, Ciudad", "relationship": "Madre",
        "document_number": "12345678",
    },
    {
        "first_name": "Carmen", "last_name": "López", "email": "carmen.lopez@email.com",
        "phone": "987-654-3211", "address": "Avenida 456, Ciudad", "relationship": "Madre",
        "document_number": "87654321",
    },
    {
        "first_name": "Pedro", "last_name": "García", "email": "pedro.garcia@email.com",
        "phone": "555-0123", "address": "Calle 123, Ciudad", "relationship": "Padre",
        "document_number": "11223344",
    },
]

EMERGENCY_CONTACT_ROWS = [
    {
        "first_name": "Dr. Juan", "last_name": "Pérez", "email": "dr.perez@hospital.com",
        "phone": "987-654-3210", "address": "Hospital Central, Calle Principal 123",
        "relationship": "Médico", "document_number": "12345678",
    },
    {
        "first_name": "Ana", "last_name": "Martínez", "email": "ana.martinez@email.com",
        "phone": "987-654-3211", "address": "Calle Secundaria 456",
        "relationship": "Familiar", "document_number": "87654321",
    },
    {
        "first_name": "Carlos", "last_name": "López", "email": "carlos.lopez@email.com",
        "phone": "555-0123", "address": "Avenida Principal 789",
        "relationship": "Amigo de la familia", "document_number": "11223344",
    },
    {
        "first_name": "Dra. María", "last_name": "González", "email": "dra.gonzalez@clinica.com",
        "phone": "555-0456", "address": "Clínica San José, Av. Libertad 321",
        "relationship": "Médico", "document_number": "55667788",
    },
]

STUDENT_ROWS = [
    {
        "first_name": "Ana", "last_name": "García", "email": "ana.garcia@email.com",
        "phone": "123-456-7890", "date_of_birth": "2015-03-15", "grade": "Primero",
        "section": "A", "parent_name": "María García", "parent_phone": "987-654-3210",
        "parent_email": "maria.garcia@email.com", "address": "Calle 123, Ciudad",
        "tutors": [
            {"public_id": "tut-001", "relationship": "Madre"},
            {"public_id": "tut-003", "relationship": "Padre"},
        ],
        "emergency_contacts": [{"public_id": "ec-001", "relationship": "Médico"}],
    },
    {
        "first_name": "Carlos", "last_name": "López", "date_of_birth": "2014-07-22",
        "grade": "Segundo", "section": "B", "parent_name": "Carmen López",
        "parent_phone": "987-654-3211", "parent_email": "carmen.lopez@email.com",
        "address": "Avenida 456, Ciudad",
        "tutors": [{"public_id": "tut-002", "relationship": "Madre"}],
    },
]

GROUP_ROWS = [
    {"academic_level": "Primaria", "grade": "Primero", "name": "A", "academic_year": "2024-2025",
     "max_students": 25, "students_count": 20},
    {"academic_level": "Primaria", "grade": "Segundo", "name": "B", "academic_year": "2024-2025",
     "max_students": 30, "students_count": 28},
    {"academic_level": "Secundaria", "grade": "Tercero", "name": "A", "academic_year": "2024-2025",
     "max_students": 20, "students_count": 15},
    {"academic_level": "Primaria", "grade": "Cuarto", "name": "C", "academic_year": "2023-2024",
     "max_students": 22, "students_count": 18, "is_active": False},
    {"academic_level": "Secundaria", "grade": "Primero", "name": "B", "academic_year": "2024-2025",
     "max_students": 25, "students_count": 23},
]

ENROLLMENT_ROWS = [
    {
        "student_public_id": "stu-001", "student_full_name": "Ana García",
        "group_public_id": "grp-001", "group_full_name": "Primero A",
        "enrollment_date": "2024-02-01", "academic_year": "2024-2025", "enrollment_fee": 250.0,
        "status": "CONFIRMADA", "notes": "Inscripción completa con documentos",
    },
    {
        "student_public_id": "stu-002", "student_full_name": "Carlos López",
        "group_public_id": "grp-002", "group_full_name": "Segundo B",
        "enrollment_date": "2024-02-01", "academic_year": "2024-2025", "enrollment_fee": 250.0,
        "status": "PENDIENTE", "notes": "Falta documentación médica",
    },
]

PAYMENT_ROWS = [
    {
        "student_public_id": "stu-001", "amount": 150.0, "payment_date": "2025-01-05",
        "description": "Desayuno - Enero 2025", "payment_method": "transferencia",
        "status": "pagado", "due_date": "2025-01-31", "period": "Enero 2025", "period_type": "mensual",
    },
    {
        "student_public_id": "stu-002", "amount": 30.0, "description": "Desayuno - Semana 1 Agosto",
        "payment_method": "efectivo", "status": "pendiente", "due_date": "2025-08-07",
        "period": "Semana 1 de Agosto 2025", "period_type": "semanal",
    },
    {
        "student_public_id": "stu-001", "amount": 5.0, "payment_date": "2025-08-06",
        "description": "Desayuno - Día 6 Agosto", "payment_method": "efectivo",
        "status": "pagado", "due_date": "2025-08-06", "period": "Día 6/8/2025", "period_type": "diario",
    },
]


def seed_demo_data(store: InMemoryStore) -> InMemoryStore:
    store.seed(GRADES, GRADE_CATALOG)
    store.seed(TUTORS, TUTOR_ROWS)
    store.seed(EMERGENCY_CONTACTS, EMERGENCY_CONTACT_ROWS)
    store.seed(STUDENTS, STUDENT_ROWS)
    store.seed(GROUPS, GROUP_ROWS)
    store.seed(ENROLLMENTS, ENROLLMENT_ROWS)
    store.seed(PAYMENTS, PAYMENT_ROWS)
    return store
