from fastapi import APIRouter, Depends
from app.db.storage import PersonRepository
from app.models.person_model import ParentIn, Person
from app.utils.deps import get_repository
from app.services.relationship_service import add_parent_of, list_available_parents, remove_parent_of

router = APIRouter(prefix="/api/v1/persons/{personId}/parents", tags=["Relationships"])

@router.post("", response_model=Person)
async def add_parent_route(personId: str, body: ParentIn, repo: PersonRepository = Depends(get_repository)):
    return await add_parent_of(repo, personId, body.parentId)

@router.get("/available", response_model=list[Person])
async def available_parents_route(personId: str, repo: PersonRepository = Depends(get_repository)):
    """Candidates that would pass every parent check for this person."""
    return await list_available_parents(repo, personId)

@router.delete("/{parentId}", response_model=Person)
async def remove_parent_route(personId: str, parentId: str, repo: PersonRepository = Depends(get_repository)):
    return await remove_parent_of(repo, personId, parentId)
