# ecosim

A small turn-based ecosystem simulation. Rabbits (`Conejo`), foxes (`Zorro`)
and magic owls (`BuhoMagico`) live on a grid of linked nodes. Every move,
hunt, birth and death is printed as it happens.

## Rules of a turn

Each living creature on each node does the following, in this order:

1. It ages by one turn.
2. It is added to the creature list of a random neighbouring node (up,
   down, left or right). It is not removed from the node it came from.
3. It hunts on the node it is acting from:
   - foxes kill the first living rabbit there;
   - magic owls kill the first living rabbit or fox there.
4. It breeds if it is older than three turns and another living creature of
   its species shares the node. The newborn is a `Conejo("Gazapo")`,
   `Zorro("Cachorro")` or `BuhoMagico("PollueloMágico")`.
5. A magic owl casts its spell, "Hechizo Infravision". It can cast it only
   once in its life.
6. It may die of natural causes. The chance is 1 in 20 for rabbits, 1 in 30
   for foxes and 1 in 25 for magic owls.

When every node has been visited, dead creatures are removed from all
nodes. The turn's newborns are then placed on the central node of the map.

Nodes are visited row by row, and each node works from a copy of its
creature list taken when the node is reached. A creature that moves to a
node that is visited later in the same turn will act again there.

## Installation

```
pip install .
```

## Running the simulation

```
ecosim
ecosim --turnos 20 --semilla 42
```

This builds a 5×5 map with one magic owl at (2,2), rabbits at (1,1) and
(1,3), and foxes at (4,0) and (0,4). It then runs the turns.

- `--turnos N` sets the number of turns. The default is 10, and negative
  values are rejected.
- `--semilla S` seeds the random generator so that a run can be repeated.

## Using it from Python

```python
import random

from ecosim.simulacion import crear_mapa_inicial, simular

mapa = crear_mapa_inicial()
simular(mapa, 10, random.Random(42))

for nodo in mapa:
    for criatura in nodo.criaturas:
        print(nodo.x, nodo.y, criatura.tipo, criatura.nombre, criatura.edad)
```

`ecosim.simulacion.ejecutar_turno(mapa, rng, centro)` runs a single turn
and puts the newborns on the node `centro`. It returns the list of
creatures born in that turn. `simular` prints a `--- Turno N ---` header
before each turn and uses the node at `(ancho // 2, alto // 2)` as the
centre. It raises `ValueError` if the map has no nodes.

### Maps

`ecosim.mapa.Mapa(ancho, alto)` creates a grid of `Nodo` cells. Each cell
is linked to its neighbours through `arriba`, `abajo`, `izquierda` and
`derecha`. A negative size raises `ValueError`.

- `mapa.nodo(x, y)` returns a cell, or `None` if the position is outside
  the map.
- `mapa[y]` returns a row as a list of cells.
- Iterating over `mapa` yields every cell, row by row.
- `nodo.vecinos()` returns the cell's existing neighbours in the order up,
  down, left, right.

To place a creature, append it to a cell's `criaturas` list:

```python
from ecosim.mapa import Mapa
from ecosim.especies import Conejo, Zorro

mapa = Mapa(3, 3)
mapa.nodo(0, 0).criaturas.append(Conejo("Bugs"))
mapa.nodo(2, 2).criaturas.append(Zorro("Foxy"))
```

### Creatures

Every creature derives from `ecosim.criatura.Criatura`. A creature has the
following members:

- `nombre` and `edad`;
- the read-only properties `tipo` (`"Conejo"`, `"Zorro"` or `"BúhoMágico"`)
  and `viva`;
- `morir()`;
- `actuar(nodo, rng)`, which plays one turn and returns the newborns.

The `ecosim.criatura.Magico` mixin provides `puede_usar_magia()` and
`usar_magia()`.

## Limitations

The simulation only prints text to standard output. It has no graphical
display, and it cannot save or reload the state of a map. The starting
layout used by the `ecosim` command is fixed.

## Tests

```
pip install .[test]
pytest
```