"""Consolidação das despesas com Eventos/Sinistros das demonstrações contábeis da ANS."""

__version__ = "1.0.0"
