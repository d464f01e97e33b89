"""Grid of linked cells on which the creatures live."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ecosim.criatura import Criatura


@dataclass(eq=False)
class Nodo:
    """One cell of the map, linked to its four orthogonal neighbours."""

    x: int
    y: int
    arriba: Optional[Nodo] = field(default=None, repr=False)
    abajo: Optional[Nodo] = field(default=None, repr=False)
    izquierda: Optional[Nodo] = field(default=None, repr=False)
    derecha: Optional[Nodo] = field(default=None, repr=False)
    criaturas: list[Criatura] = field(default_factory=list, repr=False)

    def vecinos(self) -> list[Nodo]:
        """Existing neighbours, in the order up, down, left, right."""
        candidatos = (self.arriba, self.abajo, self.izquierda, self.derecha)
        return [n for n in candidatos if n is not None]


class Mapa:
    """Rectangular grid of ``Nodo`` cells with neighbour links set up."""

    def __init__(self, ancho: int, alto: int) -> None:
        if ancho < 0 or alto < 0:
            raise ValueError(f"invalid map size {ancho}x{alto}")
        self.ancho = ancho
        self.alto = alto
        self._grid: list[list[Nodo]] = [
            [Nodo(x, y) for x in range(ancho)] for y in range(alto)
        ]
        for y, fila in enumerate(self._grid):
            for x, nodo in enumerate(fila):
                if y > 0:
                    nodo.arriba = self._grid[y - 1][x]
                if y < alto - 1:
                    nodo.abajo = self._grid[y + 1][x]
                if x > 0:
                    nodo.izquierda = fila[x - 1]
                if x < ancho - 1:
                    nodo.derecha = fila[x + 1]

    def nodo(self, x: int, y: int) -> Optional[Nodo]:
        """Return the cell at (x, y), or None when outside the map."""
        if 0 <= x < self.ancho and 0 <= y < self.alto:
            return self._grid[y][x]
        return None

    def __getitem__(self, y: int) -> list[Nodo]:
        return self._grid[y]

    def __iter__(self) -> Iterator[Nodo]:
        """Yield every cell row by row, left to right."""
        for fila in self._grid:
            yield from fila