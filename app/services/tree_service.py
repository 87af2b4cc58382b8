from starlette.concurrency import run_in_threadpool
from app.db.storage import PersonRepository
from app.models.person_model import Lineage, Person
from app.services.lineage import PersonGraph, get_ancestors, get_lineage
from app.utils.deps import get_person_or_404

async def get_tree(repo: PersonRepository):
    graph = PersonGraph(await run_in_threadpool(repo.load))
    links = [
        {"source": parent.id, "target": child.id}
        for child in graph.persons
        for parent in graph.parents_of(child.id)
    ]
    return {"nodes": graph.persons, "links": links}

async def get_ancestors_of(repo: PersonRepository, person_id: str) -> list[Person]:
    persons = await run_in_threadpool(repo.load)
    get_person_or_404(persons, person_id)
    return get_ancestors(person_id, persons)

async def get_lineage_of(repo: PersonRepository, person_id: str) -> Lineage:
    persons = await run_in_threadpool(repo.load)
    get_person_or_404(persons, person_id)
    return get_lineage(person_id, persons)
