# tests/modules/verification/infrastructure/test_observability.py
"""
Tests para: ObservabilityService y configure_logging
Tipo: Unitario
Validación:
  1. Estructura de Logs (JSON)
  2. Manejo de Errores (Exceptions)
  3. Métricas SRE (Latency + RAM Saturation)
"""
import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from file_verifier.modules.verification.infrastructure.observability import (
    ObservabilityService,
    configure_logging,
)

OBS = "file_verifier.modules.verification.infrastructure.observability"


class TestObservabilityService:

    # ─── 1. Pruebas de Utilidad Básica ────────────────────────────────────────

    def test_correlation_id_format(self):
        cid = ObservabilityService.get_correlation_id()
        assert isinstance(cid, str)
        assert len(cid) == 8

    @patch(f"{OBS}.logger")
    def test_log_structure_compliance(self, mock_logger):
        ObservabilityService.log_event("test.evt", "123", {"checks": 2})

        args, _ = mock_logger.debug.call_args
        log_json = json.loads(args[0])

        for field in ["timestamp", "level", "event", "correlation_id", "data"]:
            assert field in log_json

    # ─── 2. Decorador & Métricas SRE (RAM) ────────────────────────────────────

    @patch(f"{OBS}.psutil")
    @patch(f"{OBS}.logger")
    def test_measure_latency_logs_ram_and_target(self, mock_logger, mock_psutil):
        process_mock = MagicMock()
        process_mock.memory_info.return_value.rss = 104857600  # 100 MB
        mock_psutil.Process.return_value = process_mock

        @ObservabilityService.measure_latency("verify_op")
        def work(base_dir):
            return "done"

        assert work("/proj") == "done"

        last_call = mock_logger.debug.call_args_list[-1]
        log_json = json.loads(last_call[0][0])
        assert log_json["event"] == "verify_op.completed"
        assert log_json["data"]["end_ram_mb"] == 100.0
        assert log_json["data"]["target"] == "/proj"
        assert log_json["data"]["status"] == "success"

    # ─── 3. Manejo de Errores ─────────────────────────────────────────────────

    @patch(f"{OBS}.psutil")
    @patch(f"{OBS}.logger")
    def test_measure_latency_reraises_and_logs_failure(self, mock_logger, mock_psutil):
        process_mock = MagicMock()
        process_mock.memory_info.return_value.rss = 52428800  # 50 MB
        mock_psutil.Process.return_value = process_mock

        @ObservabilityService.measure_latency("fail_op")
        def broken():
            raise RuntimeError("Critical Failure")

        with pytest.raises(RuntimeError):
            broken()

        mock_logger.error.assert_called_once()
        log_json = json.loads(mock_logger.error.call_args[0][0])
        assert log_json["event"] == "fail_op.failed"
        assert log_json["data"]["error_msg"] == "Critical Failure"
        assert log_json["data"]["crash_ram_mb"] == 50.0


def test_configure_logging_installs_console_and_file_handlers(tmp_path):
    log_file = tmp_path / "verifier.log"
    root = logging.getLogger()
    previous = list(root.handlers)

    try:
        configure_logging(level=logging.WARNING, log_file=str(log_file))

        kinds = [type(h) for h in root.handlers]
        assert logging.StreamHandler in kinds
        assert logging.FileHandler in kinds
        assert root.handlers[0].level == logging.WARNING

        logging.getLogger("verifier.test").debug("mensaje forense")
        for handler in root.handlers:
            handler.flush()
        assert "mensaje forense" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = previous
