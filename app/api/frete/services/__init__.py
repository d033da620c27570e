from .service_frete_resolver import FreteStrategyResolver, normalizar_modalidade

__all__ = [
    "FreteStrategyResolver",
    "normalizar_modalidade",
]
