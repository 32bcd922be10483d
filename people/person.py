from dataclasses import dataclass, asdict


@dataclass
class Person:
    """
    One stored registry record.
    `id` is assigned by the registry and never changes afterwards.
    """
    id: str
    name: str
    age: float          # int from forms, any number from the API
    city: str

    def to_dict(self) -> dict:
        return asdict(self)

    def describe(self) -> str:
        return f"ID: {self.id}, Nome: {self.name}, Idade: {self.age}, Cidade: {self.city}"
