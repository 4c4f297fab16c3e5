"""
Application wiring tests.

The combined Socket.IO + FastAPI app is started through its lifespan, so the
loop exception handler and the mounted routes are the ones uvicorn would run.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

import main
from dependencies import get_transcription_handler, get_upload_storage
from infrastructure import LocalUploadStorage


class UnusedHandler:
    async def transcribe(self, path):
        raise AssertionError("handler must not be called")


@pytest.fixture
def client(tmp_path):
    main.api.dependency_overrides[get_upload_storage] = lambda: LocalUploadStorage(
        tmp_path / "uploads"
    )
    main.api.dependency_overrides[get_transcription_handler] = UnusedHandler
    with TestClient(main.app) as client:
        yield client
    main.api.dependency_overrides.clear()


async def _installed_exception_handler():
    return asyncio.get_running_loop().get_exception_handler()


async def _report_lost_task_error():
    asyncio.get_running_loop().call_exception_handler(
        {
            "message": "Task exception was never retrieved",
            "exception": RuntimeError("lost"),
        }
    )


def test_lifespan_installs_loop_exception_handler(client):
    handler = client.portal.call(_installed_exception_handler)

    assert handler is main._log_unhandled_exception


def test_unhandled_loop_exception_is_logged_and_server_keeps_serving(client, caplog):
    client.portal.call(_report_lost_task_error)

    records = [
        record
        for record in caplog.records
        if record.getMessage() == "Unhandled exception in event loop"
    ]
    assert len(records) == 1
    assert records[0].context_message == "Task exception was never retrieved"
    assert "lost" in records[0].error

    response = client.post("/upload-audio")

    assert response.status_code == 400
    assert response.text == "No file uploaded."


def test_socketio_endpoint_is_mounted_beside_the_api(client):
    response = client.get("/socket.io/", params={"EIO": "4", "transport": "polling"})

    assert response.status_code == 200
    assert response.text.startswith("0")
