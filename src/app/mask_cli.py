"""
CLI simples para as máscaras do painel
======================================

Expõe um comando por máscara (`telefone`, `documento`, `placa`, `moeda`,
`digitar-moeda`, `desmascarar`) e imprime o resultado. Inclui níveis de
log configuráveis.
"""
# src/app/mask_cli.py
import logging
from enum import Enum

import typer
from src.utils.masks import (
    format_money,
    mask_cpf_cnpj,
    mask_currency,
    mask_phone,
    mask_plate,
    unmask_currency,
)

app = typer.Typer(help="CLI para aplicar as máscaras de formulário do painel.")

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

def _configure_logging(level: LogLevel) -> None:
    numeric = getattr(logging, level.value, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

_LOG_OPTION = typer.Option(LogLevel.INFO, "--log-level", help="Nível de log")


def _emit(comando: str, valor: str, resultado) -> None:
    logging.getLogger("cli").debug("%s(%r) -> %r", comando, valor, resultado)
    typer.echo(resultado)


@app.command()
def telefone(
    valor: str = typer.Argument(..., help="Telefone com ou sem formatação"),
    log_level: LogLevel = _LOG_OPTION,
):
    """Formata telefone: (DD) DDDDD-DDDD."""
    _configure_logging(log_level)
    _emit("telefone", valor, mask_phone(valor))


@app.command()
def documento(
    valor: str = typer.Argument(..., help="CPF ou CNPJ"),
    log_level: LogLevel = _LOG_OPTION,
):
    """Formata CPF (até 11 dígitos) ou CNPJ."""
    _configure_logging(log_level)
    _emit("documento", valor, mask_cpf_cnpj(valor))


@app.command()
def placa(
    valor: str = typer.Argument(..., help="Placa do veículo"),
    log_level: LogLevel = _LOG_OPTION,
):
    """Formata placa: AAA-1234 ou Mercosul AAA-1A23."""
    _configure_logging(log_level)
    _emit("placa", valor, mask_plate(valor))


@app.command()
def moeda(
    valor: str = typer.Argument(..., help="Valor numérico, ex.: 1250.5"),
    log_level: LogLevel = _LOG_OPTION,
):
    """Exibe o valor em reais."""
    _configure_logging(log_level)
    _emit("moeda", valor, format_money(valor))


@app.command("digitar-moeda")
def digitar_moeda(
    valor: str = typer.Argument(..., help="Dígitos digitados no campo de preço"),
    log_level: LogLevel = _LOG_OPTION,
):
    """Lê os dígitos como centavos: 10050 -> R$ 100,50."""
    _configure_logging(log_level)
    _emit("digitar-moeda", valor, mask_currency(valor))


@app.command()
def desmascarar(
    valor: str = typer.Argument(..., help='Valor formatado, ex.: "R$ 1.250,50"'),
    log_level: LogLevel = _LOG_OPTION,
):
    """Converte o texto em reais de volta para número."""
    _configure_logging(log_level)
    _emit("desmascarar", valor, unmask_currency(valor))

if __name__ == "__main__":
    app()
