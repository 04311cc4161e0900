class ErroFatal(Exception):
    """Falha que impede qualquer processamento (diretório de staging ou arquivo de saída indisponível)."""
