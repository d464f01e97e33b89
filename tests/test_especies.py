import pytest

from ecosim.especies import BuhoMagico, Conejo, Zorro
from ecosim.mapa import Mapa


class _Ultimo:
    """Always picks the highest value: last neighbour, never a natural death."""

    def randrange(self, n):
        return n - 1


class _Primero:
    """Always picks zero: first neighbour, and natural death every time."""

    def randrange(self, n):
        return 0


def _solo(*criaturas):
    mapa = Mapa(1, 1)
    nodo = mapa.nodo(0, 0)
    nodo.criaturas.extend(criaturas)
    return nodo


@pytest.mark.parametrize(
    "criatura, esperado",
    [(Conejo("a"), "Conejo"), (Zorro("b"), "Zorro"), (BuhoMagico("c"), "BúhoMágico")],
)
def test_tipo(criatura, esperado):
    assert criatura.tipo == esperado


@pytest.mark.parametrize("clase", [Conejo, Zorro, BuhoMagico])
def test_edad_aumenta_cada_turno(clase):
    criatura = clase("x")
    nodo = _solo(criatura)
    for _ in range(3):
        criatura.actuar(nodo, _Ultimo())
    assert criatura.edad == 3
    assert criatura.viva


@pytest.mark.parametrize("clase", [Conejo, Zorro, BuhoMagico])
def test_muerte_natural(clase, capsys):
    criatura = clase("Bugs")
    nodo = _solo(criatura)
    criatura.actuar(nodo, _Primero())
    assert not criatura.viva
    assert "Bugs ha muerto de forma natural en (0,0)" in capsys.readouterr().out


def test_conejo_salta_a_vecino(capsys):
    mapa = Mapa(2, 1)
    origen = mapa.nodo(0, 0)
    conejo = Conejo("Bugs")
    origen.criaturas.append(conejo)
    conejo.actuar(origen, _Ultimo())
    assert conejo in mapa.nodo(1, 0).criaturas
    assert conejo in origen.criaturas
    assert "Bugs salta del nodo (0,0) a (1,0)" in capsys.readouterr().out


def test_movimiento_elige_por_indice():
    mapa = Mapa(3, 3)
    centro = mapa.nodo(1, 1)
    zorro = Zorro("Foxy")
    centro.criaturas.append(zorro)
    zorro.actuar(centro, _Primero())
    assert zorro in centro.arriba.criaturas
    assert zorro not in centro.derecha.criaturas


def test_conejo_se_reproduce_tras_tres_turnos():
    conejo = Conejo("Bugs")
    nodo = _solo(conejo, Conejo("Lola"))
    for _ in range(3):
        assert conejo.actuar(nodo, _Ultimo()) == []
    crias = conejo.actuar(nodo, _Ultimo())
    assert [c.nombre for c in crias] == ["Gazapo"]
    assert crias[0].tipo == "Conejo"
    assert crias[0].edad == 0


def test_conejo_no_se_reproduce_con_pareja_muerta():
    conejo = Conejo("Bugs")
    pareja = Conejo("Lola")
    pareja.morir()
    nodo = _solo(conejo, pareja)
    conejo.edad = 5
    assert conejo.actuar(nodo, _Ultimo()) == []


def test_conejo_solo_no_se_reproduce():
    conejo = Conejo("Bugs")
    nodo = _solo(conejo)
    conejo.edad = 10
    assert conejo.actuar(nodo, _Ultimo()) == []


def test_zorro_caza_un_solo_conejo(capsys):
    zorro = Zorro("Foxy")
    bugs, lola = Conejo("Bugs"), Conejo("Lola")
    nodo = _solo(zorro, bugs, lola)
    zorro.actuar(nodo, _Ultimo())
    assert not bugs.viva
    assert lola.viva
    assert zorro.viva
    assert "Foxy ha cazado a Bugs!" in capsys.readouterr().out


def test_zorro_no_caza_zorros():
    zorro, otro = Zorro("Foxy"), Zorro("Zorro")
    nodo = _solo(zorro, otro)
    zorro.actuar(nodo, _Ultimo())
    assert otro.viva


def test_zorro_se_reproduce():
    zorro = Zorro("Foxy")
    nodo = _solo(zorro, Zorro("Zorro"))
    zorro.edad = 3
    crias = zorro.actuar(nodo, _Ultimo())
    assert [(c.tipo, c.nombre) for c in crias] == [("Zorro", "Cachorro")]


@pytest.mark.parametrize("presa", [Conejo("Bugs"), Zorro("Foxy")])
def test_buho_caza_conejos_y_zorros(presa):
    buho = BuhoMagico("Buho")
    nodo = _solo(buho, presa)
    buho.actuar(nodo, _Ultimo())
    assert not presa.viva


def test_buho_no_caza_buhos():
    buho, otro = BuhoMagico("Buho"), BuhoMagico("Otro")
    nodo = _solo(buho, otro)
    buho.actuar(nodo, _Ultimo())
    assert otro.viva


def test_buho_usa_magia_una_vez(capsys):
    buho = BuhoMagico("Buho")
    nodo = _solo(buho)
    assert buho.puede_usar_magia()
    buho.actuar(nodo, _Ultimo())
    buho.actuar(nodo, _Ultimo())
    salida = capsys.readouterr().out
    assert not buho.puede_usar_magia()
    assert salida.count("¡Usando magia: Hechizo Infravision!") == 1


def test_buho_se_reproduce():
    buho = BuhoMagico("Buho")
    nodo = _solo(buho, BuhoMagico("Otro"))
    buho.edad = 3
    crias = buho.actuar(nodo, _Ultimo())
    assert [c.nombre for c in crias] == ["PollueloMágico"]
    assert crias[0].puede_usar_magia()