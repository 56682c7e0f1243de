"""API: camada de borda HTTP do painel.

Responsabilidades:
- Expor o estado do painel (snapshot) e as ações do operador
- Validar payloads de entrada (pydantic)
- Traduzir erros do painel em status HTTP

Subpastas:
- routes/: endpoints HTTP (health, vendedores)

NÃO PODE conter: regras de paginação, validação de formulário ou IO com o backend.
"""
