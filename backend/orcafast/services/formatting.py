"""
Formatação de valores e textos dos documentos
Projeto: OrçaFAST (Orçamentos e Contratos)

- Moeda no padrão pt-BR (R$ 1.234,56)
- Valor por extenso (num2words, pt_BR)
- Marcação de termos jurídicos em negrito
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable

from num2words import num2words

from orcafast.schemas.contract import TextSegment

CENTS = Decimal("0.01")


def round_money(value: Any) -> Decimal:
    """Arredonda para centavos (ROUND_HALF_UP)."""
    if value is None or value == "":
        value = 0
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Any) -> str:
    """
    Formata o valor como moeda brasileira.

    Examples:
        1234.5 -> "R$ 1.234,50"
        -100 -> "-R$ 100,00"
    """
    amount = round_money(value)
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {formatted}"


def amount_in_words(value: Any) -> str:
    """Valor monetário por extenso em português (reais e centavos)."""
    return num2words(round_money(value), lang="pt_BR", to="currency")


def currency_with_words(value: Any) -> str:
    """'R$ 1.000,00 (mil reais)': formato usado nas cláusulas de valor."""
    return f"{format_currency(value)} ({amount_in_words(value)})"


def format_percentage(value: Any) -> str:
    """Percentual sem casas decimais, como exibido no total do orçamento."""
    return f"{round_money(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP)}%"


def format_quantity(value: Any) -> str:
    """Quantidade sem zeros à direita (2.50 -> '2,5')."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value or 0))
    text = f"{value.normalize():f}"
    return text.replace(".", ",")


def split_bold_terms(text: str, terms: Iterable[str]) -> list[TextSegment]:
    """
    Quebra o texto em segmentos, marcando em negrito os termos informados.

    A comparação ignora maiúsculas/minúsculas e respeita limites de palavra.
    """
    if not text:
        return []

    escaped = [re.escape(term) for term in sorted(terms, key=len, reverse=True)]
    if not escaped:
        return [TextSegment(text=text)]

    pattern = re.compile(r"(?<!\w)(" + "|".join(escaped) + r")(?!\w)", re.IGNORECASE)

    segments: list[TextSegment] = []
    position = 0
    for match in pattern.finditer(text):
        if match.start() > position:
            segments.append(TextSegment(text=text[position:match.start()]))
        segments.append(TextSegment(text=match.group(0), bold=True))
        position = match.end()
    if position < len(text):
        segments.append(TextSegment(text=text[position:]))
    return segments


def split_starred_text(text: str) -> list[TextSegment]:
    """Trechos entre *asteriscos* viram negrito (observações do orçamento)."""
    if not text:
        return []
    segments = []
    for part in re.split(r"(\*.*?\*)", text):
        if not part:
            continue
        if len(part) > 1 and part.startswith("*") and part.endswith("*"):
            segments.append(TextSegment(text=part[1:-1], bold=True))
        else:
            segments.append(TextSegment(text=part))
    return segments
