"""Protocolos e contratos do core da aplicação."""

from .email_normalizer import EmailTextNormalizerProtocol

__all__ = [
    "EmailTextNormalizerProtocol",
]
