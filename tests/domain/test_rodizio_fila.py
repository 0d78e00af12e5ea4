from motor_cotacao.domain.vendedor.entities import ConfigRodizio, Vendedor
from motor_cotacao.domain.vendedor.enums import StatusVendedor
from motor_cotacao.domain.vendedor.rodizio import proximo_da_fila, reposicionar_ponteiro


def _girar(fila: list[str], elegiveis: set[str], vezes: int, ponteiro: int = -1) -> list[str]:
    atribuidos: list[str] = []
    for _ in range(vezes):
        escolha = proximo_da_fila(fila, ponteiro, elegiveis)
        assert escolha is not None
        atribuidos.append(escolha.vendedor_id)
        ponteiro = escolha.posicao
    return atribuidos


def test_rotacao_justa():
    assert _girar(["A", "B", "C"], {"A", "B", "C"}, 4) == ["A", "B", "C", "A"]


def test_inelegivel_pulado():
    assert _girar(["A", "B", "C"], {"A", "C"}, 4) == ["A", "C", "A", "C"]


def test_janela_de_n_atribuicoes_cobre_todos():
    fila = ["A", "B", "C", "D", "E"]
    elegiveis = {"A", "C", "E"}
    janela = _girar(fila, elegiveis, 3, ponteiro=3)
    assert sorted(janela) == ["A", "C", "E"]


def test_fila_vazia():
    assert proximo_da_fila([], -1, {"A"}) is None


def test_todos_inelegiveis():
    assert proximo_da_fila(["A", "B"], 0, set()) is None


def test_unico_elegivel_repete():
    assert _girar(["A", "B"], {"B"}, 3) == ["B", "B", "B"]


def test_ponteiro_fora_da_fila_normalizado():
    """Fila encolheu depois da ultima atribuicao."""
    escolha = proximo_da_fila(["A", "B"], 5, {"A", "B"})
    assert escolha is not None
    assert escolha.vendedor_id in {"A", "B"}


def test_reposicionar_acompanha_ultimo_atribuido():
    config = ConfigRodizio(fila=("A", "B", "C"), ponteiro=1, ultimo_vendedor_id="B")
    assert reposicionar_ponteiro(config, ["C", "A", "B"]) == 2
    assert reposicionar_ponteiro(config, ["A", "C"]) == -1


def test_elegibilidade_do_vendedor():
    assert Vendedor(id="1", nome="Ana").elegivel_rodizio
    assert not Vendedor(id="2", nome="Bia", status=StatusVendedor.VACATION).elegivel_rodizio
    assert not Vendedor(id="3", nome="Caio", status=StatusVendedor.INACTIVE).elegivel_rodizio
    assert not Vendedor(id="4", nome="Duda", participa_rodizio=False).elegivel_rodizio
