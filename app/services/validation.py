"""Field and relationship validation for person records.

Validators return a list of ``FieldError``; an empty list means the input
is acceptable. Nothing here raises for bad data or touches storage.
"""
import re
from datetime import date
from typing import Callable, Optional

from app.models.common import FieldError
from app.models.person_model import Person, PersonInput
from app.services.lineage import PersonGraph, PersonsLike, is_descendant
from app.utils.dates import age_difference_in_years, is_date_in_future, parse_date

MIN_PARENT_AGE_DIFFERENCE = 15
MAX_PARENTS = 2
MAX_CHAR_POB = 100

PLACE_OF_BIRTH_RE = re.compile(r"^[a-zA-Z0-9\s]+$")

def validate_person(data: PersonInput, today: date | None = None) -> list[FieldError]:
    """Validate person data for creation."""
    errors: list[FieldError] = []

    if not data.name or not data.name.strip():
        errors.append(FieldError(field="name", message="Name is required"))

    if not data.dateOfBirth:
        errors.append(FieldError(field="dateOfBirth", message="Date of birth is required"))
    else:
        dob = parse_date(data.dateOfBirth)
        if dob is None:
            errors.append(FieldError(field="dateOfBirth", message="Invalid date format"))
        elif is_date_in_future(dob, today):
            errors.append(FieldError(field="dateOfBirth", message="Date of birth cannot be in the future"))

    # Optional; format is reported ahead of length
    pob = data.placeOfBirth
    if pob and not PLACE_OF_BIRTH_RE.match(pob):
        errors.append(FieldError(field="placeOfBirth",
                                 message="Place of birth must only contain letters, numbers and spaces"))
    elif pob and len(pob) > MAX_CHAR_POB:
        errors.append(FieldError(field="placeOfBirth",
                                 message=f"Place of birth must be less than {MAX_CHAR_POB} characters"))

    return errors

# ---------------------------------------------------------------------------
# Parent relationship checks
# ---------------------------------------------------------------------------

RelationshipCheck = Callable[[Person, Person, PersonGraph], Optional[str]]

def _check_self_parent(parent: Person, child: Person, graph: PersonGraph) -> Optional[str]:
    if parent.id == child.id:
        return "A person cannot be their own parent"
    return None

def _check_max_parents(parent: Person, child: Person, graph: PersonGraph) -> Optional[str]:
    if len(child.parentIds) >= MAX_PARENTS:
        return f"A person can have at most {MAX_PARENTS} parents"
    return None

def _check_already_parent(parent: Person, child: Person, graph: PersonGraph) -> Optional[str]:
    if parent.id in child.parentIds:
        return "This person is already a parent"
    return None

def _check_age_gap(parent: Person, child: Person, graph: PersonGraph) -> Optional[str]:
    age_diff = age_difference_in_years(parent.dateOfBirth, child.dateOfBirth)
    if age_diff < MIN_PARENT_AGE_DIFFERENCE:
        return (f"Parent must be at least {MIN_PARENT_AGE_DIFFERENCE} years older than child "
                f"(current difference: {age_diff} years)")
    return None

def _check_cycle(parent: Person, child: Person, graph: PersonGraph) -> Optional[str]:
    # The age gap already rules out most cycles; kept for corrupted data
    # and for any future relaxation of the age rule.
    if is_descendant(parent.id, child.id, graph):
        return "Cannot create cyclical relationship: this person is a descendant of the child"
    return None

# (check, halts) in evaluation order. A failing halting check ends the run.
PARENT_CHECKS: list[tuple[RelationshipCheck, bool]] = [
    (_check_self_parent, True),
    (_check_max_parents, True),
    (_check_already_parent, True),
    (_check_age_gap, False),
    (_check_cycle, False),
]

def _run_parent_checks(parent: Person, child: Person, graph: PersonGraph) -> list[FieldError]:
    errors: list[FieldError] = []
    for check, halts in PARENT_CHECKS:
        message = check(parent, child, graph)
        if message is None:
            continue
        errors.append(FieldError(field="parentId", message=message))
        if halts:
            break
    return errors

def validate_parent_relationship(parent: Person, child: Person, all_persons: PersonsLike) -> list[FieldError]:
    """Validate adding ``parent`` to ``child.parentIds``."""
    return _run_parent_checks(parent, child, PersonGraph.of(all_persons))

def get_available_parents(child_id: str, all_persons: PersonsLike) -> list[Person]:
    """Every person that could legally be added as a parent of ``child_id``."""
    graph = PersonGraph.of(all_persons)
    child = graph.get(child_id)
    if child is None:
        return []
    return [p for p in graph.persons if not _run_parent_checks(p, child, graph)]
