"""
Exceções customizadas da aplicação.
Projeto: OrçaFAST (Orçamentos e Contratos)

Define exceções específicas do domínio para um tratamento
centralizado dos erros.

NOTA: BusinessValidationError é distinta de pydantic.ValidationError.
- pydantic.ValidationError: erros de formato/tipo nos dados de entrada (FastAPI → 422)
- BusinessValidationError: violações das regras de negócio (nosso handler → 422)
"""

from typing import Any, Dict, Optional

__all__ = [
    "AppException",
    "NotFoundError",
    "DuplicateError",
    "BusinessValidationError",
    "ValidationError",       # alias de BusinessValidationError
    "ConflictError",
]


class AppException(Exception):
    """
    Exceção base da aplicação.

    Attributes:
        status_code: HTTP status code devolvido ao cliente
        error_code: Identificador único do erro para o frontend
        detail: Mensagem legível para o usuário
        extra: Dados adicionais para o frontend
    """

    status_code: int = 500
    error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        detail: str,
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.detail = detail
        self.error_code = error_code if error_code is not None else self.error_code
        self.extra = extra
        self.status_code = self.__class__.status_code
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        """Corpo JSON padrão das respostas de erro."""
        body: Dict[str, Any] = {"detail": self.detail, "error_code": self.error_code}
        if self.extra:
            body["extra"] = self.extra
        return body


class NotFoundError(AppException):
    """Recurso não encontrado (cliente, preset...)."""

    status_code: int = 404
    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        detail: str = "Recurso não encontrado",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(detail, error_code, extra)


class DuplicateError(AppException):
    """
    Tentativa de criar um recurso duplicado.

    Usada para violações de unicidade (ex. CPF/CNPJ já cadastrado).
    """

    status_code: int = 409
    error_code: str = "DUPLICATE_RESOURCE"

    def __init__(
        self,
        detail: str = "Recurso já existente",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(detail, error_code, extra)


class BusinessValidationError(ValueError, AppException):
    """
    Violação de regra de negócio.

    Herda de ValueError para poder ser levantada dentro dos validadores
    Pydantic.

    Exemplos:
        - "Informe a forma de pagamento quando o método for 'Outro'"
        - "A garantia só se aplica a contratos de Website"
    """

    status_code: int = 422
    error_code: str = "BUSINESS_VALIDATION_ERROR"

    def __init__(
        self,
        detail: str = "Validação de dados falhou",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        # Chama AppException.__init__ diretamente para não passar pelo ValueError
        AppException.__init__(self, detail, error_code, extra)


# Alias para compatibilidade
ValidationError = BusinessValidationError


class ConflictError(AppException):
    """
    Conflito de estado.

    Usada quando uma operação não pode ser concluída por causa
    do estado atual do recurso (ex. contador de orçamentos bloqueado).
    """

    status_code: int = 409
    error_code: str = "CONFLICT_STATE"

    def __init__(
        self,
        detail: str = "Conflito de estado",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(detail, error_code, extra)
