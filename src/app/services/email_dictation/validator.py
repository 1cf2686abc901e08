"""Validação estrutural do candidato e atribuição de confiança."""

from __future__ import annotations

import re

from app.domain.email_dictation import CandidateValidation, Confidence

_LOCAL_PATTERN = re.compile(r"^[a-z0-9._+-]+$")
_DOMAIN_PATTERN = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)


def is_valid_local(local: str) -> bool:
    return bool(local) and _LOCAL_PATTERN.fullmatch(local) is not None


def is_valid_domain(domain: str) -> bool:
    return _DOMAIN_PATTERN.fullmatch(domain) is not None and ".." not in domain


def validate_candidate(candidate: str) -> CandidateValidation:
    """Valida o candidato limpo e retorna a confiança correspondente.

    Prioridade:
    - sem `@` → 0.4 (texto ainda pode ser útil)
    - local e domínio válidos → 0.99, único caso válido
    - local válido e domínio não vazio → 0.8
    - demais casos → 0.6
    """
    at = candidate.find("@")
    if at == -1:
        return CandidateValidation(is_valid=False, confidence=Confidence.NO_SEPARATOR)

    local = candidate[:at]
    domain = candidate[at + 1 :]
    local_ok = is_valid_local(local)
    domain_ok = is_valid_domain(domain)

    if local_ok and domain_ok:
        confidence = Confidence.VALID
    elif local_ok and domain:
        confidence = Confidence.PARTIAL
    else:
        confidence = Confidence.MALFORMED

    return CandidateValidation(
        is_valid=local_ok and domain_ok,
        confidence=confidence,
        local=local,
        domain=domain,
    )
