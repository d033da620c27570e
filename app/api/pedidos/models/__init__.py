from app.api.pedidos.models.model_pedido import Pedido

__all__ = ["Pedido"]
