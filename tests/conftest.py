"""Configuração do pytest para o painel de vendedores."""

import sys
from pathlib import Path

# src/ no PYTHONPATH para imports absolutos (app, api, config, utils)
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))
