import asyncio

import pytest

from app.utils import (
    DependencyError,
    call_dependency,
    find_regional_plate,
    find_text_field,
    is_plausible_plate,
    normalize_plate,
    strip_code_fences,
)


class TestNormalizePlate:
    """Casos de teste para função normalize_plate."""

    def test_removes_spaces_and_symbols(self):
        """Testa remoção de espaços, hífens e pontos."""
        assert normalize_plate("dl 8c-ab.1234") == "DL8CAB1234"

    def test_none_becomes_empty(self):
        """Testa que None vira string vazia."""
        assert normalize_plate(None) == ""

    def test_already_normalized(self):
        """Testa placa já normalizada."""
        assert normalize_plate("HR26CT1871") == "HR26CT1871"


class TestIsPlausiblePlate:
    """Casos de teste para a heurística de formato de placa."""

    def test_plausible_plates(self):
        """Testa placas com formato plausível."""
        for plate in ["DL8CX9291", "HR26CT1871", "MH12AB1234", "KA01A1234"]:
            assert is_plausible_plate(plate), f"Placa {plate} deveria ser plausível"

    def test_length_bounds(self):
        """Testa limites de comprimento [7, 11]."""
        assert is_plausible_plate("AB12345")
        assert is_plausible_plate("AB123456789")
        assert not is_plausible_plate("AB1234")
        assert not is_plausible_plate("AB1234567890")

    def test_requires_two_letters_then_digit(self):
        """Testa que é preciso duas letras seguidas de um dígito."""
        assert not is_plausible_plate("XX99YY")
        assert not is_plausible_plate("1234567")
        assert not is_plausible_plate("ABCDEFGH")

    def test_lowercase_is_not_plausible(self):
        """Testa que placas minúsculas não passam sem normalização."""
        assert not is_plausible_plate("hr26ct1871")

    def test_non_strings(self):
        """Testa valores que não são strings."""
        assert not is_plausible_plate(None)
        assert not is_plausible_plate(12345678)


class TestFindRegionalPlate:
    """Casos de teste para busca de placa no payload serializado."""

    def test_finds_plate_inside_nested_payload(self):
        """Testa placa em campo aninhado."""
        payload = {"outputs": [{"ocr": {"result": "plate: HR 26 CT 1871"}}]}
        assert find_regional_plate(payload) == "HR26CT1871"

    def test_case_insensitive(self):
        """Testa que a busca ignora maiúsculas/minúsculas."""
        assert find_regional_plate({"text": "dl8cx9291"}) == "DL8CX9291"

    def test_no_plate(self):
        """Testa payload sem placa."""
        assert find_regional_plate({"outputs": [], "time": 0.12}) is None


class TestFindTextField:
    """Casos de teste para a busca recursiva limitada do campo `text`."""

    def test_first_text_field_in_order(self):
        """Testa que retorna o primeiro campo `text` longo o suficiente."""
        payload = {
            "a": {"text": "abc"},
            "b": [{"text": "FIRST-LONG"}, {"text": "SECOND-LONG"}],
        }
        assert find_text_field(payload) == "FIRST-LONG"

    def test_ignores_short_text(self):
        """Testa que textos com 5 caracteres ou menos são ignorados."""
        assert find_text_field({"text": "12345"}) is None
        assert find_text_field({"text": "123456"}) == "123456"

    def test_ignores_non_string_text(self):
        """Testa que `text` não textual é ignorado."""
        assert find_text_field({"text": 1234567, "inner": {"text": "ABCDEFG"}}) == "ABCDEFG"

    def test_respects_max_depth(self):
        """Testa que a profundidade é limitada."""
        payload = {"text": None}
        node = payload
        for _ in range(10):
            node["child"] = {}
            node = node["child"]
        node["text"] = "DEEPTEXT1"
        assert find_text_field(payload, max_depth=3) is None
        assert find_text_field(payload, max_depth=20) == "DEEPTEXT1"

    def test_respects_max_nodes(self):
        """Testa que o número de nós visitados é limitado."""
        payload = {"items": [{"noise": i} for i in range(100)] + [{"text": "LATETEXT1"}]}
        assert find_text_field(payload, max_nodes=50) is None
        assert find_text_field(payload, max_nodes=500) == "LATETEXT1"

    def test_scalar_payload(self):
        """Testa payload escalar."""
        assert find_text_field("just a string") is None
        assert find_text_field(None) is None


class TestStripCodeFences:
    """Casos de teste para remoção de blocos de código markdown."""

    def test_json_fence(self):
        """Testa bloco ```json."""
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        """Testa bloco ``` sem linguagem."""
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_uppercase_fence(self):
        """Testa bloco ```JSON."""
        assert strip_code_fences('```JSON {"a": 1} ```') == '{"a": 1}'

    def test_no_fence(self):
        """Testa texto sem bloco."""
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestCallDependency:
    """Casos de teste para o wrapper de chamadas externas."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Testa chamada bem sucedida."""
        async def call():
            return 42

        result = await call_dependency("test", call(), timeout=1.0)
        assert result.ok
        assert result.value == 42
        assert result.value_or(0) == 42

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Testa chamada que excede o timeout."""
        async def call():
            await asyncio.sleep(5)

        result = await call_dependency("test", call(), timeout=0.01)
        assert not result.ok
        assert isinstance(result.error, asyncio.TimeoutError)
        assert result.value_or(1.0) == 1.0

    @pytest.mark.asyncio
    async def test_dependency_error(self):
        """Testa erro reportado pelo próprio serviço."""
        async def call():
            raise DependencyError("test", "quota exceeded")

        result = await call_dependency("test", call(), timeout=1.0)
        assert not result.ok
        assert result.error.message == "quota exceeded"

    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        """Testa que erros inesperados não são propagados."""
        async def call():
            raise RuntimeError("boom")

        result = await call_dependency("test", call(), timeout=1.0)
        assert not result.ok
        assert isinstance(result.error, RuntimeError)
