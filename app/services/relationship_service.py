import logging
from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool
from app.db.storage import PersonRepository
from app.models.person_model import Person
from app.services.validation import get_available_parents, validate_parent_relationship
from app.utils.deps import get_person_or_404

logger = logging.getLogger(__name__)

def _link_parent(repo: PersonRepository, child_id: str, parent_id: str) -> Person:
    # Load, validate and save under one lock so the check sees what gets written
    with repo.lock:
        persons = repo.load()
        child = get_person_or_404(persons, child_id)
        parent = get_person_or_404(persons, parent_id, detail="Parent person not found")

        errors = validate_parent_relationship(parent, child, persons)
        if errors:
            logger.warning("Rejected parent %s for %s: %s", parent_id, child_id, [e.message for e in errors])
            raise HTTPException(
                status_code=400,
                detail={"message": "Validation failed", "errors": [e.model_dump() for e in errors]},
            )

        updated = child.model_copy(update={"parentIds": [*child.parentIds, parent_id]})
        repo.save([updated if p.id == child_id else p for p in persons])
    return updated

def _unlink_parent(repo: PersonRepository, child_id: str, parent_id: str) -> Person:
    with repo.lock:
        persons = repo.load()
        child = get_person_or_404(persons, child_id)
        if parent_id not in child.parentIds:
            raise HTTPException(status_code=404, detail="Parent relationship not found")

        updated = child.model_copy(update={"parentIds": [pid for pid in child.parentIds if pid != parent_id]})
        repo.save([updated if p.id == child_id else p for p in persons])
    return updated

async def add_parent_of(repo: PersonRepository, child_id: str, parent_id: str) -> Person:
    updated = await run_in_threadpool(_link_parent, repo, child_id, parent_id)
    logger.info("Added parent %s to %s", parent_id, child_id)
    return updated

async def remove_parent_of(repo: PersonRepository, child_id: str, parent_id: str) -> Person:
    updated = await run_in_threadpool(_unlink_parent, repo, child_id, parent_id)
    logger.info("Removed parent %s from %s", parent_id, child_id)
    return updated

async def list_available_parents(repo: PersonRepository, child_id: str) -> list[Person]:
    persons = await run_in_threadpool(repo.load)
    get_person_or_404(persons, child_id)
    return get_available_parents(child_id, persons)
