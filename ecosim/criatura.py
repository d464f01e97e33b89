"""Base classes shared by every creature of the ecosystem."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecosim.mapa import Nodo


class Criatura(ABC):
    """A living being that acts once per turn on the cell it occupies."""

    def __init__(self, nombre: str) -> None:
        self.nombre = nombre
        self.edad = 0
        self._viva = True

    @abstractmethod
    def actuar(self, nodo: Nodo, rng: random.Random) -> list[Criatura]:
        """Play one turn on ``nodo`` and return the offspring born in it."""

    @property
    @abstractmethod
    def tipo(self) -> str:
        """Name of the species."""

    @property
    def viva(self) -> bool:
        """Whether the creature is still alive."""
        return self._viva

    def morir(self) -> None:
        """Mark the creature as dead."""
        self._viva = False

    def __repr__(self) -> str:
        estado = "viva" if self._viva else "muerta"
        return f"{type(self).__name__}({self.nombre!r}, edad={self.edad}, {estado})"


class Magico:
    """Mixin for creatures that own a spell usable a single time."""

    def __init__(self, poder: str) -> None:
        self.poder_magico = poder
        self.magia_disponible = True

    def puede_usar_magia(self) -> bool:
        """Whether the spell is still available."""
        return self.magia_disponible

    def usar_magia(self) -> None:
        """Cast the spell if it is still available; it is then spent."""
        if self.magia_disponible:
            print(f"¡Usando magia: {self.poder_magico}!")
            self.magia_disponible = False