"""
Testes das máscaras de formulário
=================================

Cobre telefone, CPF/CNPJ, placa e os três formatos de moeda, incluindo
entradas parciais (digitação em andamento) e entradas inválidas.
"""
import pytest

from src.utils.masks import (
    format_money,
    mask_cpf_cnpj,
    mask_currency,
    mask_input_currency,
    mask_phone,
    mask_plate,
    only_digits,
    unmask_currency,
    unmask_money,
)


def test_only_digits():
    assert only_digits("(11) 98765-4321") == "11987654321"
    assert only_digits(None) == ""
    assert only_digits(1234) == "1234"


def test_digitos_nao_ascii_sao_removidos():
    # dígitos arábico-índicos e de largura total não contam como dígitos
    assert only_digits("١٢٣4５") == "4"
    assert mask_phone("١١٩٨٧٦٥٤٣٢١") == ""
    assert unmask_currency("R$ ١٢,50") == pytest.approx(0.5)


class TestMaskPhone:
    """Máscara de telefone (DD) DDDDD-DDDD"""

    def test_celular_completo(self):
        assert mask_phone("11987654321") == "(11) 98765-4321"

    def test_fixo(self):
        assert mask_phone("1155551234") == "(11) 5555-1234"

    @pytest.mark.parametrize(
        "digitado, esperado",
        [
            ("", ""),
            ("1", "(1"),
            ("11", "(11"),
            ("119", "(11) 9"),
            ("119876", "(11) 9876"),
            ("1198765", "(11) 9-8765"),
            ("11987654", "(11) 98-7654"),
        ],
    )
    def test_digitacao_parcial(self, digitado, esperado):
        assert mask_phone(digitado) == esperado

    def test_valor_ja_formatado_nao_muda(self):
        assert mask_phone("(11) 98765-4321") == "(11) 98765-4321"

    def test_ignora_letras(self):
        assert mask_phone("tel: 11 9 8765 4321") == "(11) 98765-4321"

    def test_limite_de_15_caracteres(self):
        assert len(mask_phone("9" * 200)) <= 15
        assert len(mask_phone("119876543210")) == 15

    def test_none(self):
        assert mask_phone(None) == ""


class TestMaskCpfCnpj:
    """CPF até 11 dígitos, CNPJ acima disso"""

    def test_cpf(self):
        assert mask_cpf_cnpj("12345678901") == "123.456.789-01"

    def test_cnpj(self):
        assert mask_cpf_cnpj("12345678000199") == "12.345.678/0001-99"

    @pytest.mark.parametrize(
        "digitado, esperado",
        [
            ("", ""),
            ("123", "123"),
            ("1234", "123.4"),
            ("1234567", "123.456.7"),
            ("1234567890", "123.456.789-0"),
        ],
    )
    def test_cpf_parcial(self, digitado, esperado):
        assert mask_cpf_cnpj(digitado) == esperado

    def test_cpf_vira_cnpj_no_12o_digito(self):
        assert mask_cpf_cnpj("12345678901") == "123.456.789-01"
        assert mask_cpf_cnpj("123456789012") == "12.345.678/9012"

    def test_cnpj_descarta_digitos_extras(self):
        assert mask_cpf_cnpj("12345678000199123456") == "12.345.678/0001-99"
        assert len(mask_cpf_cnpj("1" * 500)) <= 18

    def test_reaplicar_em_valor_formatado(self):
        assert mask_cpf_cnpj("123.456.789-01") == "123.456.789-01"
        assert mask_cpf_cnpj("12.345.678/0001-99") == "12.345.678/0001-99"

    @pytest.mark.parametrize("size", range(1, 12))
    def test_padrao_cpf_para_ate_11_digitos(self, size):
        out = mask_cpf_cnpj("9" * size)
        assert "/" not in out
        if size > 3:
            assert out[3] == "."
        if size > 6:
            assert out[7] == "."
        if size > 9:
            assert out[11] == "-"
            assert len(out.split("-")[1]) == size - 9

    @pytest.mark.parametrize("size", range(12, 15))
    def test_padrao_cnpj_acima_de_11_digitos(self, size):
        out = mask_cpf_cnpj("9" * size)
        assert out[2] == "." and out[6] == "." and out[10] == "/"
        if size > 12:
            assert out[15] == "-"
            assert len(out.split("-")[1]) == size - 12


class TestMaskPlate:
    """Placa AAA-1234 e Mercosul AAA-1A23"""

    def test_placa_antiga(self):
        assert mask_plate("abc1234") == "ABC-1234"

    def test_mercosul(self):
        assert mask_plate("ABC1D23") == "ABC-1D23"

    @pytest.mark.parametrize(
        "digitado, esperado",
        [("", ""), ("a", "A"), ("abc", "ABC"), ("abc1", "ABC-1"), ("abc-12", "ABC-12")],
    )
    def test_parcial(self, digitado, esperado):
        assert mask_plate(digitado) == esperado

    def test_remove_caracteres_invalidos(self):
        assert mask_plate(" a.b c/1 2 3 4 ") == "ABC-1234"

    def test_sem_letras_no_inicio_nao_insere_hifen(self):
        assert mask_plate("1234567") == "1234567"

    @pytest.mark.parametrize("raw", ["abc1234567890", "x" * 300, "!@#$%^&*()", "ção-9z9z9z9z", None])
    def test_saida_sempre_valida(self, raw):
        out = mask_plate(raw)
        assert len(out) <= 8
        assert out.count("-") <= 1
        assert all(ch == "-" or ("A" <= ch <= "Z") or ch.isdigit() for ch in out)


class TestFormatMoney:
    def test_formata_milhar_e_centavos(self):
        assert format_money(1250.5) == "R$ 1.250,50"
        assert format_money(1234567.891) == "R$ 1.234.567,89"

    def test_string_numerica(self):
        assert format_money("1250.5") == "R$ 1.250,50"

    def test_zero(self):
        assert format_money(0) == "R$ 0,00"

    def test_negativo(self):
        assert format_money(-5) == "-R$ 5,00"

    def test_arredonda_meio_para_cima(self):
        assert format_money(0.005) == "R$ 0,01"

    @pytest.mark.parametrize("raw", ["abc", "", None, "1,5", float("nan"), float("inf"), "1e999999999"])
    def test_nao_numerico_vira_zero(self, raw):
        assert format_money(raw) == "R$ 0,00"


class TestMaskCurrency:
    def test_digitos_sao_centavos(self):
        assert mask_currency("100") == "R$ 1,00"
        assert mask_currency("10050") == "R$ 100,50"

    def test_vazio(self):
        assert mask_currency("") == "R$ 0,00"
        assert mask_currency(None) == "R$ 0,00"

    def test_digitacao_sobre_valor_formatado(self):
        # mais um dígito no fim desloca a vírgula
        assert mask_currency("R$ 1,005") == "R$ 10,05"
        # backspace remove o último dígito
        assert mask_currency("R$ 100,5") == "R$ 10,05"

    def test_idempotente(self):
        once = mask_currency("123456")
        assert mask_currency(once) == once == "R$ 1.234,56"

    def test_numero_armazenado_e_exibido_como_valor(self):
        assert mask_currency(1250.5) == "R$ 1.250,50"
        assert mask_currency(3) == "R$ 3,00"

    def test_valor_com_mais_de_28_digitos_nao_perde_centavos(self):
        raw = "1234567890123456789012345678901"
        esperado = "R$ 12.345.678.901.234.567.890.123.456.789,01"
        assert mask_currency(raw) == esperado
        assert format_money("12345678901234567890123456789.01") == esperado

    def test_entrada_muito_longa(self):
        assert mask_currency("9" * 5000).startswith("R$")

    def test_alias(self):
        assert mask_input_currency is mask_currency


class TestUnmaskCurrency:
    def test_valor_formatado(self):
        assert unmask_currency("R$ 1.250,50") == pytest.approx(1250.5)

    def test_numero_passa_direto(self):
        assert unmask_currency(99.9) == 99.9
        assert unmask_currency(7) == 7

    @pytest.mark.parametrize("raw", ["", "R$", "abc", "1,2,3", ",", None])
    def test_invalido_vira_zero(self, raw):
        assert unmask_currency(raw) == 0

    def test_alias(self):
        assert unmask_money is unmask_currency


@pytest.mark.parametrize("valor", [0, 0.01, 1.5, 10, 1250.50, 999999.99, 123456789.12])
def test_ida_e_volta_moeda(valor):
    assert unmask_currency(format_money(valor)) == pytest.approx(valor, abs=1e-9)
    assert unmask_currency(mask_currency(valor)) == pytest.approx(valor, abs=1e-9)


@pytest.mark.parametrize(
    "func",
    [mask_phone, mask_cpf_cnpj, mask_plate, format_money, mask_currency],
)
@pytest.mark.parametrize("raw", ["", None, "x" * 10000, "9" * 10000, "💥"])
def test_nunca_levanta_excecao(func, raw):
    assert isinstance(func(raw), str)


@pytest.mark.parametrize("raw", ["", None, "x" * 10000, "9" * 10000, "💥"])
def test_unmask_nunca_levanta_excecao(raw):
    assert isinstance(unmask_currency(raw), (int, float))
