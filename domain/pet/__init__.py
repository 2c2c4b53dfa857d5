from .entity import Pet
from .repository import PetRepository

__all__ = ["Pet", "PetRepository"]
