"""App: núcleo do serviço: normalização, bootstrap e observabilidade.

Subpastas:
- bootstrap/: composition root (logging, settings, normalizador)
- domain/: modelos de resultado
- services/: pipeline de normalização de emails ditados
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura.
"""
