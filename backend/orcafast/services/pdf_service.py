"""
Service para a geração de PDF com WeasyPrint + Jinja2.
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

import logging
import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from orcafast.core.config import settings
from orcafast.schemas.budget import BudgetFeatures, BudgetPreview, DiscountType
from orcafast.schemas.contract import ContractDocument
from orcafast.services.formatting import (
    format_currency,
    format_percentage,
    format_quantity,
    split_starred_text,
)

logger = logging.getLogger(__name__)

# Caminho da pasta de templates
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")

PREVIEW_LABEL = "PREVIEW"


# Import tardio do weasyprint: as bibliotecas nativas (Pango/GTK) podem faltar
def _get_weasyprint():
    """Importa o weasyprint sob demanda, com erro claro se faltar o Pango."""
    try:
        from weasyprint import HTML, CSS
        return HTML, CSS
    except OSError as e:
        raise RuntimeError(
            "Dependências do WeasyPrint não encontradas. Instale as bibliotecas "
            "do Pango (ex.: apt install libpango-1.0-0 libpangoft2-1.0-0)"
        ) from e


class PdfService:
    """
    Gera HTML e PDF dos orçamentos e contratos a partir dos templates.

    O HTML é o mesmo usado na pré-visualização; o PDF apenas o imprime
    em A4 com a folha de estilos document_style.css.
    """

    def __init__(self, features: BudgetFeatures | None = None):
        self.features = features or BudgetFeatures.from_settings(settings)
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["currency"] = format_currency
        self.env.filters["quantity"] = format_quantity
        self.env.filters["percentage"] = format_percentage
        self.env.filters["starred"] = split_starred_text

    # ------------------------------------------------------------
    # Orçamento
    # ------------------------------------------------------------

    def render_budget_html(self, preview: BudgetPreview) -> str:
        """
        Renderiza o orçamento em HTML.

        Número '0000' (não reservado) aparece como PREVIEW. O desconto geral
        só é exibido quando maior que zero, com o percentual equivalente.
        """
        template = self.env.get_template("budget_template.html")
        context = {
            "budget": preview,
            "budget_number_label": PREVIEW_LABEL if preview.is_preview else preview.budget_number,
            "show_units": self.features.units,
            "show_item_discount": any(item.item_discount_value for item in preview.items),
            "show_general_discount": (
                self.features.general_discount and preview.general_discount_value > 0
            ),
            "general_discount_is_percentage": (
                preview.general_discount_type == DiscountType.PERCENTAGE
            ),
            "css": self._stylesheet(),
        }
        return template.render(context)

    def generate_budget_pdf(self, preview: BudgetPreview) -> bytes:
        """
        Gera o PDF do orçamento.

        Args:
            preview: Orçamento calculado

        Returns:
            bytes: PDF binário pronto para download
        """
        html_out = self.render_budget_html(preview)
        pdf_bytes = self._write_pdf(html_out)
        logger.info(
            "PDF do orçamento %s gerado (%s bytes)", preview.budget_number, len(pdf_bytes)
        )
        return pdf_bytes

    # ------------------------------------------------------------
    # Contratos
    # ------------------------------------------------------------

    def render_contract_html(self, document: ContractDocument) -> str:
        template = self.env.get_template("contract_template.html")
        return template.render({"document": document, "css": self._stylesheet()})

    def generate_contract_pdf(self, document: ContractDocument) -> bytes:
        html_out = self.render_contract_html(document)
        pdf_bytes = self._write_pdf(html_out)
        logger.info("PDF do documento '%s' gerado (%s bytes)", document.title, len(pdf_bytes))
        return pdf_bytes

    # ------------------------------------------------------------
    # Métodos auxiliares
    # ------------------------------------------------------------

    def _stylesheet(self) -> str:
        with open(os.path.join(TEMPLATES_DIR, "document_style.css"), encoding="utf-8") as f:
            return f.read()

    def _write_pdf(self, html_out: str) -> bytes:
        HTML, CSS = _get_weasyprint()
        css = CSS(string="@page { size: A4; margin: 15mm; }")
        return HTML(string=html_out, base_url=TEMPLATES_DIR).write_pdf(stylesheets=[css])
