"""Tests for the main FastAPI application."""

import logging
import pytest
from unittest.mock import AsyncMock, patch, MagicMock
from fastapi.testclient import TestClient

from blogfeed.main import create_app
from tests.conftest import MockContextManager


@pytest.fixture
def mock_conn():
    conn = AsyncMock()
    conn.fetchval = AsyncMock(return_value=7)
    return conn


@pytest.fixture
def mock_get_db_pool(mock_conn):
    pool = MagicMock()
    pool.acquire.return_value = MockContextManager(mock_conn)
    with patch("blogfeed.main.get_db_pool", AsyncMock(return_value=pool)) as mock:
        yield mock


class TestMainApp:
    """Test main FastAPI application."""
    
    @pytest.fixture
    def client(self, mock_get_db_pool):
        return TestClient(create_app())
    
    def test_create_app(self):
        app = create_app()
        
        assert app.title == "Blog Feed API"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"
        assert app.openapi_url == "/openapi.json"
    
    def test_routes_registered(self):
        paths = {route.path for route in create_app().routes}
        
        assert {
            "/v1/posts", "/v1/posts/offset", "/v1/posts/cursor",
            "/v1/posts/{post_id}", "/v1/posts/{post_id}/author",
            "/v1/users", "/v1/users/{user_id}", "/v1/users/{user_id}/posts",
            "/health", "/ready", "/live", "/"
        } <= paths
    
    def test_root_endpoint(self, client):
        response = client.get("/")
        
        assert response.status_code == 200
        assert response.json()["service"] == "Blog Feed API"
        assert response.json()["version"] == "1.0.0"
    
    def test_live_endpoint(self, client):
        response = client.get("/live")
        
        assert response.status_code == 200
        assert response.json()["status"] == "alive"
    
    def test_health_endpoint(self, client):
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["database"] == "connected"
    
    def test_ready_endpoint(self, client):
        response = client.get("/ready")
        
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "service": "Blog Feed API", "posts": 7}
    
    def test_health_endpoint_database_down(self, client, mock_conn):
        mock_conn.execute.side_effect = ConnectionRefusedError("refused")
        
        response = client.get("/health")
        
        assert response.status_code == 503
        data = response.json()
        assert data["detail"] == "Database connection failed"
        assert data["database_error"] == "refused"
    
    def test_openapi_lists_pagination_parameters(self, client):
        spec = client.get("/openapi.json").json()
        
        params = {p["name"] for p in spec["paths"]["/v1/posts"]["get"]["parameters"]}
        assert params == {"skip", "take", "cursor", "include_author"}
        
        cursor_params = spec["paths"]["/v1/posts/cursor"]["get"]["parameters"]
        assert {p["name"]: p["required"] for p in cursor_params}["cursor"] is True
    
    def test_request_logging(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="blogfeed.middleware.request_logging"):
            client.get("/v1/posts/offset", params={"take": "-1"})
        
        assert any("GET /v1/posts/offset -> 422" in record.message for record in caplog.records)


class TestLifespan:
    """Test startup and shutdown."""
    
    def test_pool_initialized_and_closed(self, mock_get_db_pool):
        with patch("blogfeed.main.db_manager") as mock_manager:
            mock_manager.initialize = AsyncMock()
            mock_manager.close = AsyncMock()
            
            with TestClient(create_app()):
                mock_manager.initialize.assert_awaited_once()
            
            mock_manager.close.assert_awaited_once()
    
    def test_startup_fails_without_database(self):
        with patch("blogfeed.main.db_manager") as mock_manager:
            mock_manager.initialize = AsyncMock(side_effect=OSError("connection refused"))
            mock_manager.close = AsyncMock()
            
            with pytest.raises(OSError):
                with TestClient(create_app()):
                    pass
