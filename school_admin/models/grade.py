# school_admin/models/grade.py
from typing import List

from .base import Record, Resource


class Grade(Record):
    name: str
    sections: List[str] = []


GRADES = Resource(name="grades", label="Grade", model=Grade, id_prefix="grd")
