"""Person graph index and breadth-first lineage queries.

Every function takes the whole person collection explicitly and never
mutates it. Unknown or dangling ids are treated as absent, and visited sets
keep the traversals finite even on cyclic (corrupted) data.
"""
from collections import deque
from typing import Callable, Iterable, Union

from app.models.person_model import Lineage, Person

class PersonGraph:
    """Id lookup plus a children-of index, built once in O(V+E)."""

    def __init__(self, persons: Iterable[Person]):
        self.persons: list[Person] = list(persons)
        self.by_id: dict[str, Person] = {}
        self._children: dict[str, list[Person]] = {}
        for p in self.persons:
            self.by_id.setdefault(p.id, p)
        for p in self.persons:
            for parent_id in dict.fromkeys(p.parentIds):
                self._children.setdefault(parent_id, []).append(p)

    @classmethod
    def of(cls, persons: "Iterable[Person] | PersonGraph") -> "PersonGraph":
        return persons if isinstance(persons, PersonGraph) else cls(persons)

    def get(self, person_id: str) -> Person | None:
        return self.by_id.get(person_id)

    def parents_of(self, person_id: str) -> list[Person]:
        person = self.by_id.get(person_id)
        if person is None:
            return []
        return [self.by_id[pid] for pid in person.parentIds if pid in self.by_id]

    def children_of(self, person_id: str) -> list[Person]:
        return list(self._children.get(person_id, []))

PersonsLike = Union[Iterable[Person], PersonGraph]

def _levels(start: list[Person], expand: Callable[[str], list[Person]], exclude: str) -> list[list[Person]]:
    """BFS layered by generation. A person lands in the first layer reaching it."""
    levels: list[list[Person]] = []
    seen: set[str] = {exclude}
    frontier = []
    for p in start:
        if p.id not in seen:
            seen.add(p.id)
            frontier.append(p)
    while frontier:
        levels.append(frontier)
        nxt = []
        for p in frontier:
            for q in expand(p.id):
                if q.id not in seen:
                    seen.add(q.id)
                    nxt.append(q)
        frontier = nxt
    return levels

def get_ancestors(person_id: str, all_persons: PersonsLike) -> list[Person]:
    """All persons reachable through parent links, in discovery order."""
    graph = PersonGraph.of(all_persons)
    person = graph.get(person_id)
    if person is None:
        return []

    ancestors: list[Person] = []
    visited: set[str] = set()
    queue = deque(person.parentIds)
    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)
        ancestor = graph.get(current_id)
        if ancestor is not None:
            ancestors.append(ancestor)
            queue.extend(ancestor.parentIds)
    return ancestors

def get_descendants(person_id: str, all_persons: PersonsLike) -> list[Person]:
    """All persons reachable through child links, in discovery order."""
    graph = PersonGraph.of(all_persons)
    descendants: list[Person] = []
    found: set[str] = set()
    expanded: set[str] = set()
    queue = deque([person_id])
    while queue:
        current_id = queue.popleft()
        if current_id in expanded:
            continue
        expanded.add(current_id)
        for child in graph.children_of(current_id):
            if child.id not in found:
                found.add(child.id)
                descendants.append(child)
            queue.append(child.id)
    return descendants

def is_descendant(candidate_id: str, root_id: str, all_persons: PersonsLike) -> bool:
    """True if ``candidate_id`` is reachable downward from ``root_id``."""
    graph = PersonGraph.of(all_persons)
    expanded: set[str] = set()
    queue = deque([root_id])
    while queue:
        current_id = queue.popleft()
        if current_id in expanded:
            continue
        expanded.add(current_id)
        for child in graph.children_of(current_id):
            if child.id == candidate_id:
                return True
            queue.append(child.id)
    return False

def get_lineage(person_id: str, all_persons: PersonsLike) -> Lineage | None:
    """Ancestors and descendants of a person grouped into generations."""
    graph = PersonGraph.of(all_persons)
    person = graph.get(person_id)
    if person is None:
        return None
    ancestors = _levels(graph.parents_of(person_id), graph.parents_of, person_id)
    descendants = _levels(graph.children_of(person_id), graph.children_of, person_id)
    return Lineage(person=person, ancestors=ancestors, descendants=descendants)
