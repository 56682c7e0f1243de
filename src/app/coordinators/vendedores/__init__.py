"""Coordinators do painel de vendedores."""

from app.coordinators.vendedores.delete_controller import VendedorDeleteController
from app.coordinators.vendedores.form_controller import FORM_FIELDS, VendedorFormController
from app.coordinators.vendedores.links import (
    COPY_FEEDBACK_SECONDS,
    OnboardingLinkBoard,
    build_onboarding_link,
)
from app.coordinators.vendedores.list_controller import (
    DEFAULT_PAGE_SIZE,
    VendedorListController,
)
from app.coordinators.vendedores.models import FormBuffer, FormOutcome, PanelSnapshot
from app.coordinators.vendedores.panel import VendedorNotFoundError, VendedorPanel

__all__ = [
    "COPY_FEEDBACK_SECONDS",
    "DEFAULT_PAGE_SIZE",
    "FORM_FIELDS",
    "FormBuffer",
    "FormOutcome",
    "OnboardingLinkBoard",
    "PanelSnapshot",
    "VendedorDeleteController",
    "VendedorFormController",
    "VendedorListController",
    "VendedorNotFoundError",
    "VendedorPanel",
    "build_onboarding_link",
]
