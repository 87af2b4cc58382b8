from fastapi import HTTPException, status
from app.db.storage import PersonRepository, store
from app.models.person_model import Person

def get_repository() -> PersonRepository:
    if store.repo is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Storage not connected")
    return store.repo

def find_person(persons: list[Person], person_id: str) -> Person | None:
    return next((p for p in persons if p.id == person_id), None)

def get_person_or_404(persons: list[Person], person_id: str, detail: str = "Person not found") -> Person:
    person = find_person(persons, person_id)
    if not person:
        raise HTTPException(status_code=404, detail=detail)
    return person
