"""The concrete species of the ecosystem: rabbits, foxes and magic owls."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from ecosim.criatura import Criatura, Magico

if TYPE_CHECKING:
    from ecosim.mapa import Nodo


def _moverse(criatura: Criatura, nodo: Nodo, rng: random.Random, verbo: str) -> None:
    """Add ``criatura`` to a random neighbour of ``nodo``, announcing the move.

    The creature is not taken off ``nodo``: dead creatures are purged from
    every cell at the end of the turn, the living ones stay where they were.
    """
    vecinos = nodo.vecinos()
    if not vecinos:
        return
    destino = vecinos[rng.randrange(len(vecinos))]
    destino.criaturas.append(criatura)
    print(
        f"{criatura.nombre} {verbo} del nodo ({nodo.x},{nodo.y}) "
        f"a ({destino.x},{destino.y})"
    )


def _cazar(cazador: Criatura, nodo: Nodo, presas: tuple[str, ...]) -> None:
    """Kill the first living prey on ``nodo`` other than the hunter itself."""
    for otra in nodo.criaturas:
        if otra is not cazador and otra.tipo in presas and otra.viva:
            otra.morir()
            print(f"{cazador.nombre} ha cazado a {otra.nombre}!")
            return


def _hay_pareja(criatura: Criatura, nodo: Nodo) -> bool:
    """Whether another living creature of the same species shares ``nodo``."""
    return any(
        otra.tipo == criatura.tipo and otra is not criatura and otra.viva
        for otra in nodo.criaturas
    )


def _quizas_morir(criatura: Criatura, nodo: Nodo, rng: random.Random, dado: int) -> None:
    """Die of natural causes with probability one in ``dado``."""
    if rng.randrange(dado) == 0:
        criatura.morir()
        print(
            f"{criatura.nombre} ha muerto de forma natural en ({nodo.x},{nodo.y})"
        )


class Conejo(Criatura):
    """A rabbit: hops around, breeds and may die of old age."""

    def actuar(self, nodo: Nodo, rng: random.Random) -> list[Criatura]:
        self.edad += 1
        _moverse(self, nodo, rng, "salta")

        crias: list[Criatura] = []
        if self.edad > 3 and _hay_pareja(self, nodo):
            crias.append(Conejo("Gazapo"))
            print(f"{self.nombre} ayudo a reproducirse en ({nodo.x},{nodo.y})")

        _quizas_morir(self, nodo, rng, 20)
        return crias

    @property
    def tipo(self) -> str:
        return "Conejo"


class Zorro(Criatura):
    """A fox: moves around, hunts one rabbit per turn and breeds."""

    def actuar(self, nodo: Nodo, rng: random.Random) -> list[Criatura]:
        self.edad += 1
        _moverse(self, nodo, rng, "se mueve")
        _cazar(self, nodo, ("Conejo",))

        crias: list[Criatura] = []
        if self.edad > 3 and _hay_pareja(self, nodo):
            crias.append(Zorro("Cachorro"))
            print(f"{self.nombre} ayudo a reproducirse en ({nodo.x},{nodo.y})")

        _quizas_morir(self, nodo, rng, 30)
        return crias

    @property
    def tipo(self) -> str:
        return "Zorro"


class BuhoMagico(Criatura, Magico):
    """A magic owl: flies, hunts rabbits and foxes, breeds and casts a spell once."""

    def __init__(self, nombre: str) -> None:
        Criatura.__init__(self, nombre)
        Magico.__init__(self, "Hechizo Infravision")

    def actuar(self, nodo: Nodo, rng: random.Random) -> list[Criatura]:
        self.edad += 1
        _moverse(self, nodo, rng, "vuela")
        _cazar(self, nodo, ("Conejo", "Zorro"))

        crias: list[Criatura] = []
        if self.edad > 3 and _hay_pareja(self, nodo):
            crias.append(BuhoMagico("PollueloMágico"))
            print(f"{self.nombre} ayudó a reproducirse en ({nodo.x},{nodo.y})")

        if self.puede_usar_magia():
            self.usar_magia()

        _quizas_morir(self, nodo, rng, 25)
        return crias

    @property
    def tipo(self) -> str:
        return "BúhoMágico"