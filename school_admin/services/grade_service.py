# school_admin/services/grade_service.py
from typing import List

from .base_service import BaseService
from ..models.grade import GRADES, Grade
from ..utils.filtering import TextSearch


class GradeService(BaseService[Grade]):
    """Read-only catalog of grades and their sections."""
    resource = GRADES
    rules = {"search_text": TextSearch(("name",))}

    async def all(self) -> List[Grade]:
        return await self.search_all()
