import unittest

from fastapi.testclient import TestClient

import api.main
from api.main import create_app
from orchestrator.translation_orchestrator import GENERIC_ERROR_MESSAGE, VALIDATION_MESSAGE, TranslationOrchestrator
from stub_service import StubTranslatorService


class TestTranslatorApi(unittest.TestCase):
    def setUp(self):
        self.service = StubTranslatorService()
        self.orchestrator = TranslationOrchestrator(client=self.service.client())
        self.client = TestClient(create_app(self.orchestrator))

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_languages(self):
        languages = self.client.get("/languages").json()
        self.assertEqual(len(languages), 8)
        self.assertEqual(languages[0], {"code": "es", "display_name": "Spanish"})

    def test_initial_state(self):
        state = self.client.get("/state").json()
        self.assertEqual(state["status"], "idle")
        self.assertEqual(state["results"], {})

    def test_translate(self):
        response = self.client.post("/translate", json={"text": "Hello"})

        self.assertEqual(response.status_code, 200)
        state = response.json()
        self.assertEqual(state["status"], "success")
        self.assertEqual(len(state["results"]), 8)
        self.assertEqual(state["results"]["fr"], {"display_name": "French", "text": "fr:Hello"})
        self.assertEqual(self.client.get("/state").json(), state)

    def test_translate_empty_text(self):
        state = self.client.post("/translate", json={"text": ""}).json()

        self.assertEqual(state["status"], "failed")
        self.assertEqual(state["error_message"], VALIDATION_MESSAGE)
        self.assertEqual(self.service.auth_calls, 0)

    def test_translate_service_failure(self):
        self.service.auth_status = 401

        state = self.client.post("/translate", json={"text": "Hello"}).json()

        self.assertEqual(state["status"], "failed")
        self.assertEqual(state["error_message"], GENERIC_ERROR_MESSAGE)
        self.assertEqual(self.service.translate_calls, 0)

    def test_copy_single_translation(self):
        self.assertEqual(self.client.get("/translations/de").status_code, 404)

        self.client.post("/translate", json={"text": "Hello"})
        response = self.client.get("/translations/de")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"code": "de", "display_name": "German", "text": "de:Hello"})

    def test_translate_stream(self):
        response = self.client.post("/translate/stream", json={"text": "Hello"})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/event-stream"))
        self.assertIn("event: status", response.text)
        self.assertIn("event: done", response.text)
        self.assertIn("pt:Hello", response.text)


class TestAppLifespan(unittest.TestCase):
    def test_import_builds_no_http_client(self):
        self.assertIsNone(api.main.app.state.orchestrator)

    def test_default_orchestrator_lives_for_the_server_run(self):
        app = create_app()
        self.assertIsNone(app.state.orchestrator)

        with TestClient(app) as client:
            orchestrator = app.state.orchestrator
            self.assertIsNotNone(orchestrator)
            self.assertEqual(client.get("/state").json()["status"], "idle")

        self.assertTrue(orchestrator.client.is_closed)

    def test_injected_client_is_left_open(self):
        service = StubTranslatorService()
        http_client = service.client()
        app = create_app(TranslationOrchestrator(client=http_client))

        with TestClient(app) as client:
            client.post("/translate", json={"text": "Hello"})

        self.assertFalse(http_client.is_closed)


if __name__ == "__main__":
    unittest.main()
