"""Rotas HTTP da API: camada de view do painel.

- routes/health/: liveness e readiness
- routes/vendedores/: estado e ações do painel de vendedores
- router.py: agrega todos os routers
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
