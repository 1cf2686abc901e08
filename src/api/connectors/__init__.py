"""Connectors: adapters de borda entre HTTP e o core.

Estrutura:
- email_text/: extração e validação do parâmetro `text`
"""

__all__: list[str] = []
