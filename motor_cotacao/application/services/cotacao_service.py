from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from motor_cotacao.domain.blacklist.repository import BlacklistRepository
from motor_cotacao.domain.cotacao.elegibilidade import avaliar_cotacao
from motor_cotacao.domain.cotacao.entities import Cotacao
from motor_cotacao.domain.cotacao.repository import CotacaoRepository
from motor_cotacao.domain.cotacao.resultado import (
    CotacaoAceita,
    RejeicaoBlacklist,
    RejeicaoLimiteFipe,
    RejeicaoSemRegra,
    ResultadoElegibilidade,
)
from motor_cotacao.domain.erros import ConflitoConcorrenciaError
from motor_cotacao.domain.precificacao.repository import RegraPrecoRepository
from motor_cotacao.domain.veiculo.categoria import determinar_categoria
from motor_cotacao.domain.veiculo.value_objects import Veiculo
from motor_cotacao.domain.vendedor.enums import MotivoSemVendedor

from ..unidade_de_trabalho import Repositorios
from .rodizio_service import (
    ResultadoAtribuicao,
    RodizioService,
    SemVendedorElegivel,
    VendedorAtribuido,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registro:
    """Desfecho de registrar(): resultado da avaliacao + o que foi persistido."""

    resultado: ResultadoElegibilidade
    cotacao: Cotacao | None
    atribuicao: ResultadoAtribuicao | None = None


class CotacaoService:
    """Imperative Shell: carrega blacklist/regras, chama o Pure Core, persiste."""

    def __init__(
        self,
        blacklist_repo: BlacklistRepository,
        regra_repo: RegraPrecoRepository,
        cotacao_repo: CotacaoRepository,
        rodizio: RodizioService,
        validade_dias: int = 7,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._blacklist_repo = blacklist_repo
        self._regra_repo = regra_repo
        self._cotacao_repo = cotacao_repo
        self._rodizio = rodizio
        self._validade = timedelta(days=validade_dias)
        self._relogio = relogio

    def avaliar(self, veiculo: Veiculo) -> ResultadoElegibilidade:
        # IO (imperative shell)
        entradas = self._blacklist_repo.listar_ativas()
        categoria = determinar_categoria(
            veiculo.tipo_bruto, veiculo.categoria_cliente, veiculo.tipo_uso,
        )
        regras = self._regra_repo.listar_ativas_por_categoria(categoria)

        # Pure core
        resultado = avaliar_cotacao(veiculo, entradas, regras)
        self._log_resultado(veiculo, resultado)
        return resultado

    def registrar(self, veiculo: Veiculo) -> Registro:
        resultado = self.avaliar(veiculo)

        if isinstance(resultado, CotacaoAceita):
            return self._registrar_aceita(veiculo, resultado)

        if not resultado.salvar_como_lead:
            return Registro(resultado=resultado, cotacao=None)

        cotacao = Cotacao.rejeitada(veiculo, resultado, self._relogio(), self._validade)
        self._cotacao_repo.inserir(cotacao)
        logger.info("Lead rejeitado salvo: cotacao=%s codigo=%s", cotacao.id, resultado.codigo)
        return Registro(resultado=resultado, cotacao=cotacao)

    def obter(self, cotacao_id: str) -> Cotacao | None:
        return self._cotacao_repo.buscar_por_id(cotacao_id)

    def _registrar_aceita(self, veiculo: Veiculo, resultado: CotacaoAceita) -> Registro:
        """Ponteiro do rodizio e vendedor da cotacao gravados na mesma transacao."""

        def _op(repos: Repositorios) -> tuple[Cotacao, ResultadoAtribuicao]:
            atribuicao = self._rodizio.reservar(repos)
            vendedor_id = (
                atribuicao.vendedor_id if isinstance(atribuicao, VendedorAtribuido) else None
            )
            cotacao = Cotacao.aceita(
                veiculo, resultado, vendedor_id, self._relogio(), self._validade,
            )
            repos.cotacoes.inserir(cotacao)
            return cotacao, atribuicao

        try:
            cotacao, atribuicao = self._rodizio.executar(_op)
        except ConflitoConcorrenciaError:
            # Nunca perder o lead: grava sem vendedor, para triagem manual.
            atribuicao = SemVendedorElegivel(motivo=MotivoSemVendedor.CONFLITO)
            cotacao = Cotacao.aceita(veiculo, resultado, None, self._relogio(), self._validade)
            self._cotacao_repo.inserir(cotacao)

        if cotacao.pendente_triagem:
            logger.warning(
                "Cotacao %s aceita sem vendedor (%s): pendente de triagem",
                cotacao.id, atribuicao.motivo if isinstance(atribuicao, SemVendedorElegivel) else "-",
            )
        else:
            logger.info("Cotacao %s atribuida ao vendedor %s", cotacao.id, cotacao.vendedor_id)
        return Registro(resultado=resultado, cotacao=cotacao, atribuicao=atribuicao)

    def _log_resultado(self, veiculo: Veiculo, resultado: ResultadoElegibilidade) -> None:
        if isinstance(resultado, CotacaoAceita):
            logger.info(
                "Cotacao aceita: %s %s categoria=%s regra=%s",
                veiculo.marca, veiculo.modelo, resultado.categoria, resultado.regra_id,
            )
        elif isinstance(resultado, RejeicaoSemRegra) and resultado.sem_regras_configuradas:
            logger.error(
                "Nenhuma regra de preco ativa para a categoria %s (erro de configuracao)",
                resultado.categoria,
            )
        elif isinstance(resultado, RejeicaoSemRegra):
            logger.warning(
                "Sem faixa de preco para categoria=%s valor=%s",
                resultado.categoria, resultado.valor_fipe,
            )
        elif isinstance(resultado, (RejeicaoBlacklist, RejeicaoLimiteFipe)):
            logger.info(
                "Cotacao rejeitada (%s): %s %s", resultado.codigo, veiculo.marca, veiculo.modelo,
            )
