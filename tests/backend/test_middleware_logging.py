"""
Unit tests for backend/middleware/logging.py
"""
from types import SimpleNamespace

import pytest
import structlog
from unittest.mock import Mock, AsyncMock
from fastapi import Request, Response

from backend.middleware import logging as logging_module
from backend.middleware.logging import bind_user_context, logging_middleware


class TestLoggingMiddleware:

    @pytest.fixture
    def mock_request(self):
        request = Mock(spec=Request)
        request.state = SimpleNamespace(trace_id="trace-1")
        request.headers = {}
        request.method = "GET"
        request.url.path = "/api/hackathons"
        request.query_params = {"user_id": "u1"}
        request.client.host = "127.0.0.1"
        return request

    @pytest.fixture
    def bind(self, mocker):
        return mocker.patch.object(logging_module, "bind_request_context")

    @pytest.fixture
    def clear(self, mocker):
        return mocker.patch.object(logging_module, "clear_request_context")

    @pytest.mark.asyncio
    async def test_binds_context_and_clears(self, mock_request, bind, clear):
        call_next = AsyncMock(return_value=Response(status_code=200))

        response = await logging_middleware(mock_request, call_next)

        assert response.status_code == 200
        bind.assert_called_once_with(
            trace_id="trace-1",
            method="GET",
            path="/api/hackathons",
            client_ip="127.0.0.1",
            user_id="u1",
        )
        clear.assert_called_once()

    @pytest.mark.asyncio
    async def test_no_user_id_when_absent(self, mock_request, bind, clear):
        mock_request.query_params = {}
        await logging_middleware(mock_request, AsyncMock(return_value=Response()))
        assert "user_id" not in bind.call_args.kwargs

    @pytest.mark.asyncio
    async def test_reraises_and_clears(self, mock_request, bind, clear):
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await logging_middleware(mock_request, call_next)
        clear.assert_called_once()

    @pytest.mark.asyncio
    async def test_completion_logs_user_bound_by_route(self, mock_request, bind, clear, mocker):
        logger = mocker.patch.object(logging_module, "logger")
        mock_request.query_params = {}

        async def call_next(request):
            request.state.user_id = "u7"
            return Response(status_code=201)

        await logging_middleware(mock_request, call_next)

        completed = logger.info.call_args_list[-1]
        assert completed.args == ("Request completed",)
        assert completed.kwargs["user_id"] == "u7"
        assert completed.kwargs["status_code"] == 201

    @pytest.mark.asyncio
    async def test_completion_without_user(self, mock_request, bind, clear, mocker):
        logger = mocker.patch.object(logging_module, "logger")
        mock_request.query_params = {}

        await logging_middleware(mock_request, AsyncMock(return_value=Response()))

        assert "user_id" not in logger.info.call_args_list[-1].kwargs


def test_bind_user_context():
    request = Mock(spec=Request)
    request.state = SimpleNamespace()

    bind_user_context(request, "u3")

    assert request.state.user_id == "u3"
    assert structlog.contextvars.get_contextvars()["user_id"] == "u3"
    structlog.contextvars.clear_contextvars()


class TestUserIdInRequestLogs:

    def _completed(self, logger):
        calls = [c for c in logger.info.call_args_list if c.args == ("Request completed",)]
        assert len(calls) == 1
        return calls[0].kwargs

    def test_user_id_from_json_body(self, client, seeded_store, mocker):
        logger = mocker.patch.object(logging_module, "logger")

        response = client.post("/api/recommend", json={"user_id": "u1"})

        assert response.status_code == 200
        assert self._completed(logger)["user_id"] == "u1"

    def test_user_id_from_path(self, client, seeded_store, mocker):
        logger = mocker.patch.object(logging_module, "logger")

        client.get("/api/dashboard/u2")

        assert self._completed(logger)["user_id"] == "u2"

    def test_user_id_from_query(self, client, seeded_store, mocker):
        logger = mocker.patch.object(logging_module, "logger")

        client.get("/api/hackathons", params={"user_id": "u3"})

        assert self._completed(logger)["user_id"] == "u3"
