"""Integração com o Supabase (PostgREST)."""

from app.infra.supabase.gateway import SupabaseVendedorGateway, build_auth_headers

__all__ = ["SupabaseVendedorGateway", "build_auth_headers"]
