from fastapi import APIRouter, Depends
from app.db.storage import PersonRepository
from app.models.person_model import Lineage, Person, TreeOut
from app.utils.deps import get_repository
from app.services.tree_service import get_ancestors_of, get_lineage_of, get_tree

router = APIRouter(prefix="/api/v1", tags=["Tree"])

@router.get("/tree", response_model=TreeOut)
async def get_tree_route(repo: PersonRepository = Depends(get_repository)):
    # {"nodes": [...], "links": [...]}, one link per parent edge
    return await get_tree(repo)

@router.get("/persons/{personId}/ancestors", response_model=list[Person])
async def get_ancestors_route(personId: str, repo: PersonRepository = Depends(get_repository)):
    return await get_ancestors_of(repo, personId)

@router.get("/persons/{personId}/lineage", response_model=Lineage)
async def get_lineage_route(personId: str, repo: PersonRepository = Depends(get_repository)):
    return await get_lineage_of(repo, personId)
