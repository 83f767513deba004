# school_admin/services/student_service.py
from typing import List

from .base_service import BaseService
from ..models.student import STUDENTS, Student
from ..schemas.filters import StudentFilters
from ..schemas.pagination import PaginationParams
from ..utils.filtering import Equals, Flag, TextSearch


class StudentService(BaseService[Student]):
    resource = STUDENTS
    filter_model = StudentFilters
    rules = {
        "search_text": TextSearch(("first_name", "last_name", "email", "parent_name")),
        "grade": Equals("grade", case_sensitive=False),
        "section": Equals("section", case_sensitive=False),
        "is_active": Flag("is_active"),
    }
    sortable = (
        "first_name", "last_name", "email", "date_of_birth", "grade", "section",
        "enrollment_date", "is_active", "public_id",
    )

    async def quick_search(self, query: str) -> List[Student]:
        """Students whose name, email or parent name contains ``query``."""
        page = await self.search(StudentFilters(search_text=query), PaginationParams(unpaginated=True))
        return list(page.content)
