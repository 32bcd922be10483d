# people/validation.py

import math

from people.errors import ValidationError

PERSON_FIELDS = ("name", "age", "city")


def read_field(person, field):
    if isinstance(person, dict):
        return person.get(field)
    return getattr(person, field, None)


def _is_text(value) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value) -> bool:
    # bool is an int subclass but not an age; 0 and NaN count as missing
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return value != 0


def validate_person(person):
    """
    Presence/type checks, in order: name, age, city.
    Raises ValidationError on the first failing field.
    """
    if not _is_text(read_field(person, "name")):
        raise ValidationError("Nome é obrigatório e deve ser uma string.", field="name")

    if not _is_number(read_field(person, "age")):
        raise ValidationError("Idade é obrigatória e deve ser um número.", field="age")

    if not _is_text(read_field(person, "city")):
        raise ValidationError("Cidade é obrigatória e deve ser uma string.", field="city")
