import httpx
import orjson as json
import pytest

from app.services.plate_reader_service import PlateReaderService
from tests.utils.fake_services import (
    MEDIA_URL,
    ROBOFLOW_HOST,
    FakeServices,
    json_response,
    roboflow_payload,
    slow_reply,
)


class TestPlateReaderService:
    """Testes para a leitura de placas via Roboflow."""

    @pytest.mark.asyncio
    async def test_disabled_without_key(self):
        """Testa que sem chave não há chamada nem placa simulada."""
        fake = FakeServices()
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate is None
        assert fake.calls(ROBOFLOW_HOST) == 0

    @pytest.mark.asyncio
    async def test_reads_plate_and_sends_workflow_request(self, enabled_services):
        """Testa leitura da placa e o formato da requisição ao workflow."""
        fake = FakeServices().on(
            ROBOFLOW_HOST, json_response(roboflow_payload("HR 26 CT 1871"))
        )
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate == "HR26CT1871"

        request = fake.requests[ROBOFLOW_HOST][0]
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "api_key": "test-roboflow-key",
            "inputs": {"image": {"type": "url", "value": MEDIA_URL}},
        }

    @pytest.mark.asyncio
    async def test_error_status_returns_none(self, enabled_services):
        """Testa que erro do serviço resulta em None."""
        fake = FakeServices().on(
            ROBOFLOW_HOST,
            json_response({"message": "Unauthorized api_key"}, status_code=401),
        )
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate is None

    @pytest.mark.asyncio
    async def test_error_status_ignores_plate_in_body(self, enabled_services):
        """Testa que uma resposta de erro nunca é usada para extrair placa."""
        fake = FakeServices().on(
            ROBOFLOW_HOST,
            json_response({"message": "bad input DL8CX9291"}, status_code=500),
        )
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate is None

    @pytest.mark.asyncio
    async def test_transport_error_returns_none(self, enabled_services):
        """Testa que erro de rede resulta em None."""
        fake = FakeServices().on(ROBOFLOW_HOST, httpx.ConnectError("unreachable"))
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate is None

    @pytest.mark.asyncio
    async def test_timeout_returns_none(self, enabled_services, short_timeouts):
        """Testa que timeout resulta em None."""
        fake = FakeServices().on(ROBOFLOW_HOST, slow_reply)
        async with fake.client() as client:
            plate = await PlateReaderService(client).read(MEDIA_URL)
        assert plate is None


class TestExtractPlate:
    """Casos de teste para extração heurística da placa."""

    def test_regional_pattern_anywhere(self):
        """Testa que o padrão regional é achado em qualquer lugar da resposta."""
        payload = {"outputs": [{"debug": {"raw": ["noise", "mh 12 ab 1234"]}}]}
        assert PlateReaderService.extract_plate(payload) == "MH12AB1234"

    def test_regional_pattern_takes_precedence_over_text(self):
        """Testa que o padrão regional vence o campo `text`."""
        payload = {"text": "SOMETHING-ELSE", "other": "DL8CX9291"}
        assert PlateReaderService.extract_plate(payload) == "DL8CX9291"

    def test_text_field_fallback(self):
        """Testa o campo `text` quando o padrão regional não aparece."""
        payload = roboflow_payload("ka-05/mn.777")
        assert PlateReaderService.extract_plate(payload) == "KA05MN777"

    def test_text_field_with_bad_length(self):
        """Testa que textos com comprimento fora de [7, 11] são descartados."""
        assert PlateReaderService.extract_plate(roboflow_payload("AB-12-3")) is None
        assert (
            PlateReaderService.extract_plate(roboflow_payload("THIS IS NOT A PLATE AT ALL"))
            is None
        )

    def test_empty_payload(self):
        """Testa resposta sem conteúdo."""
        assert PlateReaderService.extract_plate({"outputs": []}) is None
