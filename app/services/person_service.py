import logging
import uuid
from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool
from app.db.storage import PersonRepository
from app.models.person_model import Person, PersonInput
from app.services.validation import validate_person
from app.utils.dates import parse_date
from app.utils.deps import get_person_or_404

logger = logging.getLogger(__name__)

def generate_id() -> str:
    return str(uuid.uuid4())

async def list_persons(repo: PersonRepository, q: str | None = None) -> list[Person]:
    persons = await run_in_threadpool(repo.load)
    if q:
        needle = q.lower()
        persons = [p for p in persons if needle in p.name.lower()]
    return persons

async def get_person(repo: PersonRepository, person_id: str) -> Person:
    return get_person_or_404(await run_in_threadpool(repo.load), person_id)

def _append_person(repo: PersonRepository, person: Person) -> None:
    with repo.lock:
        persons = repo.load()
        persons.append(person)
        repo.save(persons)

async def create_person(repo: PersonRepository, data: PersonInput) -> Person:
    errors = validate_person(data)
    if errors:
        logger.warning("Rejected person %r: %s", data.name, [e.message for e in errors])
        raise HTTPException(
            status_code=400,
            detail={"message": "Validation failed", "errors": [e.model_dump() for e in errors]},
        )

    person = Person(
        id=generate_id(),
        name=data.name.strip(),
        dateOfBirth=parse_date(data.dateOfBirth),
        placeOfBirth=(data.placeOfBirth or "").strip() or None,
        parentIds=[],
    )
    await run_in_threadpool(_append_person, repo, person)
    logger.info("Created person %s (%s)", person.id, person.name)
    return person

def _remove_person(repo: PersonRepository, person_id: str) -> None:
    with repo.lock:
        persons = repo.load()
        get_person_or_404(persons, person_id)
        # Survivors must not keep pointing at the removed person
        survivors = []
        for p in persons:
            if p.id == person_id:
                continue
            if person_id in p.parentIds:
                p = p.model_copy(update={"parentIds": [pid for pid in p.parentIds if pid != person_id]})
            survivors.append(p)
        repo.save(survivors)

async def delete_person(repo: PersonRepository, person_id: str):
    await run_in_threadpool(_remove_person, repo, person_id)
    logger.info("Deleted person %s", person_id)
    return True
