class ConflitoConcorrenciaError(Exception):
    """Escrita concorrente detectada (versao divergente ou conflito de transacao).

    Transitorio: quem chama pode repetir a operacao inteira.
    """
