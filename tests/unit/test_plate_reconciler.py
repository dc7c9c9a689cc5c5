from app.services.plate_reconciler import reconcile_plates


class TestReconcilePlates:
    """Casos de teste para a escolha entre a placa do Roboflow e a do Gemini."""

    def test_plausible_reader_plate_wins(self):
        """Testa que a placa plausível do leitor tem prioridade."""
        assert reconcile_plates("DL8CX9291", "XX99YY") == "DL8CX9291"
        assert reconcile_plates("DL8CX9291", "HR26CT1871") == "DL8CX9291"

    def test_plausible_classifier_plate_is_normalized(self):
        """Testa uso da placa plausível do classificador quando o leitor falha."""
        assert reconcile_plates("AB12", "HR26CT1871") == "HR26CT1871"
        assert reconcile_plates(None, "HR26CT1871") == "HR26CT1871"

    def test_last_resort_classifier_plate(self):
        """Testa que qualquer placa do classificador é usada se o leitor não achou nada."""
        assert reconcile_plates(None, "hr26ct1871") == "HR26CT1871"
        assert reconcile_plates(None, "XX 99-YY") == "XX99YY"

    def test_implausible_reader_plate_is_dropped(self):
        """Testa que placa implausível do leitor é descartada mesmo sem alternativa."""
        assert reconcile_plates("AB12", None) is None

    def test_implausible_classifier_plate_ignored_when_reader_found_something(self):
        """Testa que a placa implausível do classificador não substitui um resultado do leitor."""
        assert reconcile_plates("AB12", "XX99YY") is None

    def test_no_candidates(self):
        """Testa ausência de candidatos."""
        assert reconcile_plates(None, None) is None
        assert reconcile_plates("", "") is None

    def test_symbol_only_classifier_plate(self):
        """Testa que uma placa só com símbolos resulta em None, nunca em string vazia."""
        assert reconcile_plates(None, "--- ---") is None
