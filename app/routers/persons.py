from fastapi import APIRouter, Depends, Query
from typing import Optional
from app.db.storage import PersonRepository
from app.models.common import APIMessage
from app.models.person_model import Person, PersonInput, PersonList
from app.utils.deps import get_repository
from app.services.person_service import create_person, delete_person, get_person, list_persons

router = APIRouter(prefix="/api/v1/persons", tags=["Persons"])

@router.get("", response_model=PersonList)
async def list_persons_route(q: Optional[str] = Query(None), repo: PersonRepository = Depends(get_repository)):
    persons = await list_persons(repo, q)
    return {"data": persons}

@router.post("", response_model=Person, status_code=201)
async def create_person_route(body: PersonInput, repo: PersonRepository = Depends(get_repository)):
    return await create_person(repo, body)

@router.get("/{personId}", response_model=Person)
async def get_person_route(personId: str, repo: PersonRepository = Depends(get_repository)):
    return await get_person(repo, personId)

@router.delete("/{personId}", response_model=APIMessage)
async def delete_person_route(personId: str, repo: PersonRepository = Depends(get_repository)):
    await delete_person(repo, personId)
    return {"message": "Person deleted"}
