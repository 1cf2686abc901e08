"""Rotas de normalização de emails ditados (/api/parse-email, /api/format-email)."""
