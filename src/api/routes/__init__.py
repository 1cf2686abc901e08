"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (normalização, health)
- Extração inicial de parâmetros (query, corpo JSON)
- Delegação para o normalizador em app/services
- Respostas HTTP e headers CORS

Estrutura:
- routes/email_dictation/: /api/parse-email e /api/format-email
- routes/health/: liveness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
