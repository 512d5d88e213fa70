"""
Modelos de formulário do painel
===============================

Define as estruturas Pydantic validadas antes de gravar no banco:
- `ClienteForm`, `FornecedorForm`, `CarroForm`: cadastros com máscaras
- `ProdutoForm` / `ProdutoEditForm`: peças e serviços com preços em R$
- `Usuario` e `owner_filter`: escopo por dono (admin vê tudo)

Os validadores aplicam as máscaras de `src.utils.masks`, de modo que um
formulário enviado com os dígitos crus fica igual ao que a tela exibe.
"""
# src/domain/models.py
import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from src.utils.masks import (
    mask_cpf_cnpj,
    mask_currency,
    mask_phone,
    mask_plate,
    unmask_currency,
)

logger = logging.getLogger(__name__)

NOME_CLIENTE_PADRAO = "Desconhecido"
ESTOQUE_MINIMO_PADRAO = 3


def _optional_masked(v: Any, mask) -> Optional[str]:
    """Aplica a máscara; vazio vira None."""
    if v is None or v == "":
        return None
    masked = mask(v)
    return masked or None


def _optional_text(v: Any) -> Optional[str]:
    if v is None or v == "":
        return None
    return str(v)


def _min_len(v: str, size: int, message: str) -> str:
    if len(v) < size:
        raise ValueError(message)
    return v


class Role(str, Enum):
    admin = "admin"
    owner = "owner"


class TipoProduto(str, Enum):
    peca = "peca"
    servico = "servico"


class Usuario(BaseModel):
    """Usuário autenticado, como vem do contexto de autenticação."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    role: Role = Role.owner

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin


def owner_filter(usuario: Usuario) -> Optional[Tuple[str, str, str]]:
    """Filtro da consulta para o usuário.

    Admin consulta a coleção inteira (None); os demais apenas os
    documentos marcados com o próprio `ownerId`.

    Examples:
        >>> owner_filter(Usuario(id="u1", role="owner"))
        ("ownerId", "==", "u1")
    """
    if usuario.is_admin:
        return None
    return ("ownerId", "==", usuario.id)


def can_manage_produtos(usuario: Usuario) -> bool:
    """Somente admin acessa o cadastro de produtos."""
    return usuario.is_admin


class _FormBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_document(self, owner_id: Optional[str] = None) -> Dict[str, Any]:
        """Documento pronto para gravar (chaves camelCase, sem campos vazios)."""
        doc = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        if owner_id:
            doc["ownerId"] = owner_id
        return doc


class ClienteForm(_FormBase):
    """Cadastro de cliente (pessoa física ou jurídica)."""
    nome: str
    telefone: Optional[str] = None
    cpf_cnpj: Optional[str] = Field(alias="cpfCnpj", default=None)

    @field_validator("nome")
    @classmethod
    def _nome_min(cls, v: str) -> str:
        return _min_len(v, 3, "O nome deve ter pelo menos 3 caracteres.")

    @field_validator("telefone", mode="before")
    @classmethod
    def _mask_telefone(cls, v: Any) -> Optional[str]:
        logger.debug("Mascarando telefone do cliente: %r", v)
        return _optional_masked(v, mask_phone)

    @field_validator("cpf_cnpj", mode="before")
    @classmethod
    def _mask_documento(cls, v: Any) -> Optional[str]:
        logger.debug("Mascarando CPF/CNPJ do cliente: %r", v)
        return _optional_masked(v, mask_cpf_cnpj)


class FornecedorForm(_FormBase):
    """Cadastro de fornecedor."""
    nome: str
    telefone: Optional[str] = None
    cnpj: Optional[str] = None
    vendedor: Optional[str] = None

    @field_validator("nome")
    @classmethod
    def _nome_min(cls, v: str) -> str:
        return _min_len(v, 3, "O nome deve ter pelo menos 3 caracteres.")

    @field_validator("telefone", mode="before")
    @classmethod
    def _mask_telefone(cls, v: Any) -> Optional[str]:
        return _optional_masked(v, mask_phone)

    @field_validator("cnpj", mode="before")
    @classmethod
    def _mask_cnpj(cls, v: Any) -> Optional[str]:
        return _optional_masked(v, mask_cpf_cnpj)

    @field_validator("vendedor", mode="before")
    @classmethod
    def _vendedor(cls, v: Any) -> Optional[str]:
        return _optional_text(v)


class CarroForm(_FormBase):
    """Cadastro de veículo vinculado a um cliente."""
    cliente_id: str = Field(alias="clienteId")
    modelo: str
    placa: str
    ano: Optional[str] = None
    cor: Optional[str] = None

    @field_validator("cliente_id")
    @classmethod
    def _cliente_obrigatorio(cls, v: str) -> str:
        return _min_len(v, 1, "Selecione um cliente.")

    @field_validator("modelo")
    @classmethod
    def _modelo_min(cls, v: str) -> str:
        return _min_len(v, 2, "Informe o modelo.")

    @field_validator("placa", mode="before")
    @classmethod
    def _mask_placa(cls, v: Any) -> str:
        logger.debug("Mascarando placa: %r", v)
        return mask_plate(v)

    @field_validator("placa")
    @classmethod
    def _placa_min(cls, v: str) -> str:
        return _min_len(v, 7, "A placa deve ter pelo menos 7 caracteres.")

    @field_validator("ano", "cor", mode="before")
    @classmethod
    def _opcionais(cls, v: Any) -> Optional[str]:
        return _optional_text(v)

    def to_document(
        self,
        owner_id: Optional[str] = None,
        nome_cliente: Optional[str] = None,
    ) -> Dict[str, Any]:
        doc = super().to_document(owner_id)
        doc["nomeCliente"] = nome_cliente or NOME_CLIENTE_PADRAO
        return doc


class _PrecoMixin(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    preco_custo: str = Field(alias="precoCusto")
    preco_venda: str = Field(alias="precoVenda")
    estoque_minimo: int = Field(alias="estoqueMinimo", default=ESTOQUE_MINIMO_PADRAO, ge=0)
    monitorar_estoque: str = Field(alias="monitorarEstoque", default="true")

    @field_validator("preco_custo", mode="before")
    @classmethod
    def _mask_custo(cls, v: Any) -> str:
        if v is None or v == "":
            raise ValueError("Informe o custo")
        return mask_currency(v)

    @field_validator("preco_venda", mode="before")
    @classmethod
    def _mask_venda(cls, v: Any) -> str:
        if v is None or v == "":
            raise ValueError("Informe o valor de venda")
        return mask_currency(v)

    @field_validator("estoque_minimo", mode="before")
    @classmethod
    def _estoque_minimo_vazio(cls, v: Any) -> Any:
        return 0 if v is None or v == "" else v

    @field_validator("monitorar_estoque", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> str:
        if isinstance(v, bool):
            return "true" if v else "false"
        v = str(v).strip().lower()
        if v not in {"true", "false"}:
            raise ValueError('monitorarEstoque deve ser "true" ou "false"')
        return v

    def _precos_document(self) -> Dict[str, Any]:
        return {
            "precoCusto": unmask_currency(self.preco_custo),
            "precoVenda": unmask_currency(self.preco_venda),
            "monitorarEstoque": self.monitorar_estoque == "true",
        }


class ProdutoForm(_FormBase, _PrecoMixin):
    """Cadastro de peça ou serviço.

    Os preços ficam no formato de exibição ("R$ 1.250,50") enquanto o
    formulário está aberto e viram número em `to_document`.
    """
    nome: str
    codigo_sku: Optional[str] = Field(alias="codigoSku", default=None)
    tipo: TipoProduto
    estoque_atual: int = Field(alias="estoqueAtual", default=0)

    @field_validator("nome")
    @classmethod
    def _nome_min(cls, v: str) -> str:
        return _min_len(v, 3, "Mínimo 3 caracteres.")

    @field_validator("codigo_sku", mode="before")
    @classmethod
    def _sku(cls, v: Any) -> Optional[str]:
        return _optional_text(v)

    @field_validator("estoque_atual", mode="before")
    @classmethod
    def _estoque_vazio(cls, v: Any) -> Any:
        return 0 if v is None or v == "" else v

    def to_document(self, owner_id: Optional[str] = None) -> Dict[str, Any]:
        doc = super().to_document(owner_id)
        doc.update(self._precos_document())
        # Serviço não controla estoque
        if self.tipo == TipoProduto.servico:
            doc["estoqueAtual"] = 0
            doc["estoqueMinimo"] = 0
        logger.debug("Documento de produto montado: %s", doc)
        return doc


class ProdutoEditForm(_FormBase, _PrecoMixin):
    """Edição de produto: nome, preços e controle de estoque."""
    nome: str

    @field_validator("nome")
    @classmethod
    def _nome_min(cls, v: str) -> str:
        return _min_len(v, 3, "Mínimo 3 caracteres.")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ProdutoEditForm":
        """Pré-preenche o formulário de edição a partir do produto gravado."""
        return cls(
            nome=doc.get("nome", ""),
            precoCusto=mask_currency(doc.get("precoCusto", 0)),
            precoVenda=mask_currency(doc.get("precoVenda", 0)),
            estoqueMinimo=doc.get("estoqueMinimo") or ESTOQUE_MINIMO_PADRAO,
            monitorarEstoque="false" if doc.get("monitorarEstoque") is False else "true",
        )

    def to_document(self, owner_id: Optional[str] = None) -> Dict[str, Any]:
        doc = {"nome": self.nome, "estoqueMinimo": self.estoque_minimo}
        doc.update(self._precos_document())
        if owner_id:
            doc["ownerId"] = owner_id
        return doc
