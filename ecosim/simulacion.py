"""Turn loop of the ecosystem and the command that runs it."""

from __future__ import annotations

import argparse
import random

from ecosim.criatura import Criatura
from ecosim.especies import BuhoMagico, Conejo, Zorro
from ecosim.mapa import Mapa, Nodo


def crear_mapa_inicial() -> Mapa:
    """Build the 5x5 map with its starting owl, rabbits and foxes."""
    mapa = Mapa(5, 5)
    colocacion = [
        ((2, 2), BuhoMagico("Buho")),
        ((1, 1), Conejo("Bugs")),
        ((1, 3), Conejo("Lola")),
        ((4, 0), Zorro("Foxy")),
        ((0, 4), Zorro("Zorro")),
    ]
    for (x, y), criatura in colocacion:
        mapa.nodo(x, y).criaturas.append(criatura)
    return mapa


def ejecutar_turno(mapa: Mapa, rng: random.Random, centro: Nodo) -> list[Criatura]:
    """Let every living creature act, purge the dead, and put newborns on ``centro``.

    Returns the creatures born during the turn.
    """
    nuevas: list[Criatura] = []
    for nodo in mapa:
        for criatura in list(nodo.criaturas):
            if criatura.viva:
                nuevas.extend(criatura.actuar(nodo, rng))

    for nodo in mapa:
        nodo.criaturas[:] = [c for c in nodo.criaturas if c.viva]

    centro.criaturas.extend(nuevas)
    return nuevas


def simular(mapa: Mapa, turnos: int, rng: random.Random) -> None:
    """Run ``turnos`` turns, placing newborns on the central cell of the map."""
    centro = mapa.nodo(mapa.ancho // 2, mapa.alto // 2)
    if centro is None:
        raise ValueError("the map has no cells")
    for turno in range(1, turnos + 1):
        print(f"\n--- Turno {turno} ---")
        ejecutar_turno(mapa, rng, centro)


def main(argv: list[str] | None = None) -> int:
    """Run the ecosystem simulation from the command line."""
    parser = argparse.ArgumentParser(
        prog="ecosim", description="Simulate rabbits, foxes and magic owls."
    )
    parser.add_argument("--turnos", type=int, default=10, help="number of turns")
    parser.add_argument("--semilla", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.turnos < 0:
        parser.error("--turnos must not be negative")

    rng = random.Random(args.semilla)
    simular(crear_mapa_inicial(), args.turnos, rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())