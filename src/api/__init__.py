"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests (GET/POST/OPTIONS)
- Extrair e validar o parâmetro `text`
- Montar respostas JSON e headers CORS

Subpastas:
- connectors/: parsing de query/corpo JSON
- routes/: endpoints HTTP (normalização, health)

NÃO PODE conter: regras de normalização (ficam em app/services).
"""
