from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

class Person(BaseModel):
    id: str
    name: str
    dateOfBirth: date
    placeOfBirth: Optional[str] = None
    parentIds: List[str] = Field(default_factory=list, description="0, 1 or 2 parent ids; order carries no meaning")

class PersonInput(BaseModel):
    # Raw strings on purpose: the field validator reports its own messages
    name: Optional[str] = None
    dateOfBirth: Optional[str] = None
    placeOfBirth: Optional[str] = None

class PersonList(BaseModel):
    data: list[Person]

class ParentIn(BaseModel):
    parentId: str

class TreeLink(BaseModel):
    source: str
    target: str

class TreeOut(BaseModel):
    nodes: list[Person]
    links: list[TreeLink]

class Lineage(BaseModel):
    person: Person
    ancestors: list[list[Person]] = []    # nearest generation first
    descendants: list[list[Person]] = []
