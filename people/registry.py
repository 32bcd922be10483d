# people/registry.py

from people.errors import NotFoundError
from people.ids import generate_id
from people.person import Person
from people.validation import PERSON_FIELDS, read_field, validate_person


class PersonRegistry:
    """
    In-memory, insertion-ordered store of Person records.

    - add() validates before touching the list
    - update()/delete() look up before mutating
    - not thread-safe: callers sharing one registry must lock around calls
    """

    def __init__(self, id_factory=generate_id):
        self._people = []
        self._id_factory = id_factory

    def __len__(self):
        return len(self._people)

    # -------------------------------------------------
    # Write
    # -------------------------------------------------

    def add(self, person) -> Person:
        validate_person(person)

        record = Person(
            id=self._id_factory(),
            name=read_field(person, "name"),
            age=read_field(person, "age"),
            city=read_field(person, "city"),
        )
        self._people.append(record)
        return record

    def update(self, person_id: str, changes: dict) -> Person:
        """
        Shallow merge of `changes` into the stored record.
        Keys missing or set to None are skipped; the merged record is
        NOT validated again.
        """
        record = self.get(person_id)

        for field in PERSON_FIELDS:
            value = changes.get(field)
            if value is not None:
                setattr(record, field, value)

        return record

    def delete(self, person_id: str) -> Person:
        index = self._index_of(person_id)
        if index is None:
            raise NotFoundError(person_id)
        return self._people.pop(index)

    # -------------------------------------------------
    # Read
    # -------------------------------------------------

    def get(self, person_id: str) -> Person:
        index = self._index_of(person_id)
        if index is None:
            raise NotFoundError(person_id)
        return self._people[index]

    def _index_of(self, person_id):
        for i, p in enumerate(self._people):
            if p.id == person_id:
                return i
        return None

    def list(self) -> list[Person]:
        # new list each call; the records inside are the stored ones
        return list(self._people)
