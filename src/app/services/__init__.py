"""Serviços de aplicação.

Unidades puras (sem IO direto). O pipeline de emails ditados fica em
app/services/email_dictation/.
"""

from app.services.email_dictation import EmailTextNormalizer, normalize_email_text

__all__ = [
    "EmailTextNormalizer",
    "normalize_email_text",
]
