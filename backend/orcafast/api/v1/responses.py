"""
Respostas de download de PDF
Projeto: OrçaFAST (Orçamentos e Contratos)
"""

from urllib.parse import quote

from fastapi import Response


def pdf_response(pdf_bytes: bytes, filename: str) -> Response:
    """Resposta application/pdf com nome de arquivo UTF-8 (RFC 5987)."""
    ascii_name = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": (
                f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
            ),
        },
    )
