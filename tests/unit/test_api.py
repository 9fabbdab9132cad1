"""Unit tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from whitepaper_server.api.main import create_app
from whitepaper_server.core.catalog import PROMPT_TEXTS


class TestToolEndpoints:
    """Test the REST-style tool and prompt endpoints."""

    @pytest.fixture(autouse=True)
    def setup_client(self, sample_store):
        self.client = TestClient(create_app(store=sample_store))

    def test_list_tools(self):
        response = self.client.post("/tools/list")

        assert response.status_code == 200
        tools = response.json()["tools"]
        assert [t["name"] for t in tools] == [
            "search_whitepaper",
            "get_section",
            "list_sections",
            "get_key_concepts",
        ]
        assert tools[0]["inputSchema"]["required"] == ["query"]

    def test_call_tool(self):
        response = self.client.post(
            "/tools/call",
            json={"name": "get_key_concepts", "arguments": {"concept": "sp1"}},
        )

        assert response.status_code == 200
        assert response.json()["content"] == [
            {"type": "text", "text": "**sp1**\n\nA zkVM for RISC-V programs."}
        ]

    def test_call_tool_without_arguments(self):
        response = self.client.post("/tools/call", json={"name": "list_sections"})

        assert response.status_code == 200
        assert response.json()["content"][0]["text"].startswith("# Sample Whitepaper")

    def test_missing_parameter_is_400(self):
        response = self.client.post(
            "/tools/call", json={"name": "search_whitepaper", "arguments": {}}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": {"code": -32602, "message": "Missing query parameter"}
        }

    def test_lookup_miss_is_400_with_term(self):
        response = self.client.post(
            "/tools/call",
            json={"name": "get_section", "arguments": {"section": "Appendix"}},
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == 'Section "Appendix" not found'

    def test_unknown_tool_is_404(self):
        response = self.client.post("/tools/call", json={"name": "nope"})

        assert response.status_code == 404
        assert response.json()["error"] == {
            "code": -32601,
            "message": "Unknown tool: nope",
        }

    def test_malformed_body_uses_error_envelope(self):
        response = self.client.post("/tools/call", json={"name": None})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == -32602
        assert error["message"].startswith("Invalid request: body.name")

    def test_list_prompts(self):
        response = self.client.post("/prompts/list")

        assert response.status_code == 200
        assert len(response.json()["prompts"]) == 4

    def test_get_prompt(self):
        response = self.client.post("/prompts/get", json={"name": "network_architecture"})

        assert response.status_code == 200
        assert response.json()["messages"] == [
            {
                "role": "user",
                "content": {
                    "type": "text",
                    "text": PROMPT_TEXTS["network_architecture"],
                },
            }
        ]

    def test_unknown_prompt_is_400(self):
        response = self.client.post("/prompts/get", json={"name": "haiku"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Unknown prompt: haiku"


class TestRpcEndpoint:
    """Test JSON-RPC dispatch over HTTP."""

    @pytest.fixture(autouse=True)
    def setup_client(self, sample_store):
        self.client = TestClient(create_app(store=sample_store))

    def test_tools_list(self):
        response = self.client.post(
            "/rpc", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert len(body["result"]["tools"]) == 4

    def test_tools_call(self):
        response = self.client.post(
            "/rpc",
            json={
                "jsonrpc": "2.0",
                "id": "abc",
                "method": "tools/call",
                "params": {"name": "get_section", "arguments": {"section": "conclusion"}},
            },
        )

        body = response.json()
        assert body["id"] == "abc"
        assert body["result"]["content"][0]["text"] == (
            "**Conclusion**\n\nThe network coordinates provers."
        )

    def test_errors_are_in_band(self):
        response = self.client.post(
            "/rpc", json={"jsonrpc": "2.0", "id": 7, "method": "resources/list"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 7
        assert body["error"] == {"code": -32601, "message": "Unknown method: resources/list"}
        assert "result" not in body

    def test_tool_error_is_invalid_params(self):
        response = self.client.post(
            "/rpc",
            json={
                "jsonrpc": "2.0",
                "id": 2,
                "method": "tools/call",
                "params": {"name": "get_key_concepts", "arguments": {}},
            },
        )

        assert response.json()["error"]["code"] == -32602


class TestSystemEndpoints:
    def test_health(self, sample_store):
        with TestClient(create_app(store=sample_store)) as client:
            response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "1.0.0"

    def test_root(self, sample_store):
        response = TestClient(create_app(store=sample_store)).get("/")
        assert response.json()["docs"] == "/docs"
