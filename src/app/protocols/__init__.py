"""Protocolos e contratos do core da aplicação."""

from .clipboard import ClipboardProtocol
from .vendedor_gateway import QueryResult, VendedorGatewayProtocol

__all__ = [
    "ClipboardProtocol",
    "QueryResult",
    "VendedorGatewayProtocol",
]
