"""HTTP tests for the v1 endpoints, wired to a per-test SQLite database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from schoolapp.config import get_settings
from schoolapp.infrastructure.database.session import get_db_session
from schoolapp.infrastructure.dependencies import get_attachment_storage
from schoolapp.infrastructure.storage.local_file_storage import LocalFileStorage
from schoolapp.main import app


@pytest_asyncio.fixture
async def client(session_factory, upload_dir):
    async def _session_override():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session_override
    app.dependency_overrides[get_attachment_storage] = lambda: LocalFileStorage(upload_dir)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def existing(session_factory, service_for, make_teacher):
    async with session_factory() as session:
        saved = await service_for(session).save_teacher(make_teacher(1))
        await session.commit()
    return saved


@pytest.mark.asyncio
async def test_health_check_returns_200(client: AsyncClient):
    """Health endpoint should return 200 with status, version, environment and database."""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "up"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_save_teacher_with_amka_file(client: AsyncClient, make_teacher, upload_dir):
    response = await client.post(
        "/api/v1/teachers/save",
        data={"teacher": make_teacher(1).model_dump_json()},
        files={"amka_file": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["external_id"]
    assert body["tax_id"] == "000000001"
    assert "password" not in body
    assert body["attachment"]["filename"] == "doc.pdf"
    assert body["attachment"]["extension"] == ".pdf"
    assert (upload_dir / body["attachment"]["saved_name"]).exists()


@pytest.mark.asyncio
async def test_save_teacher_without_file(client: AsyncClient, make_teacher):
    response = await client.post("/api/v1/teachers/save", data={"teacher": make_teacher(1).model_dump_json()})

    assert response.status_code == 200
    assert response.json()["attachment"] is None


@pytest.mark.asyncio
async def test_save_duplicate_tax_id_returns_409(client: AsyncClient, existing, make_teacher):
    response = await client.post(
        "/api/v1/teachers/save",
        data={"teacher": make_teacher(2, tax_id="000000001").model_dump_json()},
    )

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "AccountAlreadyExists"
    assert response.json()["detail"]["subject"] == "Account"


@pytest.mark.asyncio
async def test_save_invalid_payload_returns_400(client: AsyncClient):
    response = await client.post("/api/v1/teachers/save", data={"teacher": '{"is_active": true}'})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "TeacherInvalidArgument"


@pytest.mark.asyncio
async def test_get_teacher(client: AsyncClient, existing):
    response = await client.get(f"/api/v1/teachers/{existing.external_id}")

    assert response.status_code == 200
    assert response.json()["id"] == existing.id


@pytest.mark.asyncio
async def test_get_unknown_teacher_returns_404(client: AsyncClient):
    response = await client.get("/api/v1/teachers/does-not-exist")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "TeacherNotFound"


@pytest.mark.asyncio
async def test_filtered_without_body(client: AsyncClient, existing):
    response = await client.post("/api/v1/teachers/all")

    assert response.status_code == 200
    assert [t["external_id"] for t in response.json()] == [existing.external_id]


@pytest.mark.asyncio
async def test_filtered_by_tax_id(client: AsyncClient, existing):
    response = await client.post("/api/v1/teachers/all", json={"tax_id": "999999999"})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_filtered_paginated(client: AsyncClient, existing):
    response = await client.post("/api/v1/teachers/all/paginated", json={"page_size": 1, "is_active": True})

    assert response.status_code == 200
    body = response.json()
    assert body["total_elements"] == 1
    assert body["total_pages"] == 1
    assert body["number_of_elements"] == 1
    assert body["current_page"] == 0
    assert body["page_size"] == 1


@pytest.mark.asyncio
async def test_list_with_unknown_sort_returns_400(client: AsyncClient):
    response = await client.get("/api/v1/teachers", params={"sort_by": "nope"})

    assert response.status_code == 400
    assert response.json()["detail"]["subject"] == "Sort"


@pytest.mark.asyncio
async def test_delete_teacher(client: AsyncClient, existing):
    response = await client.delete(f"/api/v1/teachers/{existing.external_id}")
    assert response.status_code == 204

    missing = await client.delete(f"/api/v1/teachers/{existing.external_id}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_employees_filtered_empty(client: AsyncClient):
    response = await client.post("/api/v1/employees/all/paginated", json={})

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["total_pages"] == 0


@pytest_asyncio.fixture
async def two_teachers(session_factory, service_for, make_teacher):
    async with session_factory() as session:
        service = service_for(session)
        saved = [await service.save_teacher(make_teacher(1)), await service.save_teacher(make_teacher(2))]
        await session.commit()
    return saved


@pytest.mark.asyncio
@pytest.mark.parametrize("direction", ["desc", "Desc", "DESC"])
async def test_list_sort_direction_ignores_case(client: AsyncClient, two_teachers, direction):
    response = await client.get("/api/v1/teachers", params={"sort_by": "id", "sort_direction": direction})

    assert response.status_code == 200
    assert [t["id"] for t in response.json()["data"]] == [two_teachers[1].id, two_teachers[0].id]


@pytest.mark.asyncio
async def test_list_with_unknown_sort_direction_returns_400(client: AsyncClient):
    response = await client.get("/api/v1/teachers", params={"sort_direction": "sideways"})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "SortInvalidArgument"


@pytest.mark.asyncio
async def test_save_rejects_oversize_attachment(client: AsyncClient, make_teacher, upload_dir, monkeypatch):
    monkeypatch.setattr(get_settings(), "max_upload_size_mb", 1)

    response = await client.post(
        "/api/v1/teachers/save",
        data={"teacher": make_teacher(1).model_dump_json()},
        files={"amka_file": ("big.pdf", b"x" * (1024 * 1024 + 1), "application/pdf")},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "AttachmentInvalidArgument"
    assert not upload_dir.exists()


@pytest.mark.asyncio
async def test_save_accepts_attachment_at_size_limit(client: AsyncClient, make_teacher, monkeypatch):
    monkeypatch.setattr(get_settings(), "max_upload_size_mb", 1)

    response = await client.post(
        "/api/v1/teachers/save",
        data={"teacher": make_teacher(1).model_dump_json()},
        files={"amka_file": ("exact.pdf", b"x" * (1024 * 1024), "application/pdf")},
    )

    assert response.status_code == 200
    assert response.json()["attachment"]["filename"] == "exact.pdf"
