# src/api/main.py
from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Type, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from src.domain.models import (
    CarroForm,
    ClienteForm,
    FornecedorForm,
    ProdutoForm,
)
from src.utils.masks import (
    format_money,
    mask_cpf_cnpj,
    mask_currency,
    mask_phone,
    mask_plate,
    unmask_currency,
)

# ----------------------------------------------------
# Setup
# ----------------------------------------------------
load_dotenv()  # carrega variáveis do arquivo .env se existir

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title=os.getenv("API_TITLE", "API Painel Oficina"),
    version="1.0.0",
    description=(
        "Máscaras e validação de formulários do painel da oficina.\n"
        "  (1) Aplicar máscara a um valor digitado\n"
        "  (2) Validar um formulário e obter o documento para gravação"
    ),
)

MASCARAS: Dict[str, Callable[[Any], Any]] = {
    "telefone": mask_phone,
    "documento": mask_cpf_cnpj,
    "placa": mask_plate,
    "moeda": format_money,
    "digitar-moeda": mask_currency,
    "desmascarar": unmask_currency,
}

FORMULARIOS: Dict[str, Type[BaseModel]] = {
    "clientes": ClienteForm,
    "fornecedores": FornecedorForm,
    "carros": CarroForm,
    "produtos": ProdutoForm,
}


# ----------------------------------------------------
# Schemas
# ----------------------------------------------------
class MascaraRequest(BaseModel):
    valor: Union[str, float, int, None] = Field(default="", description="Valor digitado no campo")


# ----------------------------------------------------
# Infra
# ----------------------------------------------------
@app.get("/health", tags=["infra"], summary="Healthcheck")
def health() -> Dict[str, str]:
    return {"status": "ok"}


# ----------------------------------------------------
# Máscaras
# ----------------------------------------------------
@app.post(
    "/mascaras/{tipo}",
    tags=["mascaras"],
    summary="Aplica a máscara indicada ao valor enviado"
)
def aplicar_mascara(tipo: str, body: MascaraRequest) -> Dict[str, Any]:
    mask = MASCARAS.get(tipo)
    if mask is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Máscara desconhecida: {tipo}")

    resultado = mask(body.valor)
    logger.debug("Máscara %s | valor=%r resultado=%r", tipo, body.valor, resultado)
    return {"tipo": tipo, "valor": body.valor, "resultado": resultado}


# ----------------------------------------------------
# Formulários
# ----------------------------------------------------
@app.post(
    "/formularios/{entidade}",
    tags=["formularios"],
    summary="Valida o formulário e devolve o documento para gravação"
)
def validar_formulario(entidade: str, body: Dict[str, Any]) -> Any:
    form_cls = FORMULARIOS.get(entidade)
    if form_cls is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Formulário desconhecido: {entidade}")

    owner_id = body.pop("ownerId", None)
    try:
        form = form_cls.model_validate(body)
    except ValidationError as e:
        logger.info("Formulário %s inválido: %s", entidade, e.errors())
        return JSONResponse(
            status_code=422,
            content={"ok": False, "erros": e.errors(include_url=False, include_context=False)},
        )

    logger.info("Formulário %s validado", entidade)
    return {"ok": True, "documento": form.to_document(owner_id)}
