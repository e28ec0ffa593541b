"""Prompt template for legal queries sent to the completion provider."""

# The query is interpolated verbatim: this is plain text, not markup, so the only
# effect of adversarial input is on model behaviour, which the provider handles.
LEGAL_QUERY_TEMPLATE = """Você é um assistente jurídico especializado. Responda à seguinte consulta jurídica de forma técnica e fundamentada:

{query}

Forneça sua resposta em português de forma clara e estruturada, incluindo:
1. Explicação técnica e completa
2. Base legal (leis, códigos, regulamentos relevantes)
3. Jurisprudência relevante quando aplicável
4. Considerações práticas importantes"""


def build_prompt(query: str) -> str:
    # str.replace, not str.format: braces in the query must pass through untouched
    return LEGAL_QUERY_TEMPLATE.replace("{query}", query, 1)
