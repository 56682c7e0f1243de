"""App: painel de vendedores: coordinators, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: estado e fluxos do painel (listagem, formulário, remoção, links)
- domain/: modelos de domínio (Vendedor)
- infra/: implementações concretas de IO (Supabase, memória)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
