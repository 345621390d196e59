"""An animal shelter that hands out the oldest cat, dog or animal."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Optional

__all__ = ["Species", "Animal", "AnimalShelter"]


class Species(enum.Enum):
    """The kinds of animal the shelter takes in."""

    DOG = "dog"
    CAT = "cat"


@dataclass(frozen=True, eq=False)
class Animal:
    """An animal with an arrival number; lower numbers arrived earlier.

    Two animals compare equal when they are of the same species.
    """

    species: Species
    id: int

    @classmethod
    def cat(cls, animal_id: int) -> "Animal":
        """Create a cat with the given arrival number."""
        return cls(Species.CAT, animal_id)

    @classmethod
    def dog(cls, animal_id: int) -> "Animal":
        """Create a dog with the given arrival number."""
        return cls(Species.DOG, animal_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self.species is other.species

    def __hash__(self) -> int:
        return hash(self.species)


class AnimalShelter:
    """Keeps cats and dogs in separate first-in, first-out queues."""

    def __init__(self) -> None:
        self.cats: deque[Animal] = deque()
        self.dogs: deque[Animal] = deque()

    def enqueue(self, animal: Animal) -> None:
        """Admit ``animal`` into the queue for its species."""
        if animal.species is Species.DOG:
            self.dogs.append(animal)
        else:
            self.cats.append(animal)

    def dequeue_cat(self) -> Optional[Animal]:
        """Hand out the oldest cat, or None if there is none."""
        return self.cats.popleft() if self.cats else None

    def dequeue_dog(self) -> Optional[Animal]:
        """Hand out the oldest dog, or None if there is none."""
        return self.dogs.popleft() if self.dogs else None

    def dequeue_any(self) -> Optional[Animal]:
        """Hand out whichever animal arrived first, or None if the shelter is empty."""
        if self.cats and self.dogs:
            if self.cats[0].id < self.dogs[0].id:
                return self.dequeue_cat()
            return self.dequeue_dog()
        if self.cats:
            return self.dequeue_cat()
        if self.dogs:
            return self.dequeue_dog()
        return None