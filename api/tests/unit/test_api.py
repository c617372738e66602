"""
Tests del contrato HTTP sobre una base SQLite con los datos de demostración.
"""
from __future__ import annotations

import asyncio
import json

import pytest
from httpx import ASGITransport, AsyncClient

from vinos_wms.main import create_application


@pytest.fixture
async def client(seeded_context):
    app = create_application(seeded_context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.fixture
async def auth_headers(client):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "juan@vinos.com", "password": "password"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_login_with_bad_password_returns_401(client):
    response = await client.post("/api/v1/auth/login", json={"email": "juan@vinos.com", "password": "x"})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"


async def test_protected_endpoint_requires_token(client):
    response = await client.get("/api/v1/entradas/")

    assert response.status_code == 401
    assert response.json() == {"error": "UNAUTHORIZED", "message": "Debes iniciar sesión", "details": {}}


async def test_create_and_list_entrada(client, auth_headers):
    payload = {
        "delivery_note_id": "ALB-E-20251101",
        "truck_plate": "1111-AAA",
        "carrier": "Transportes Rápidos",
        "driver": "Carlos Ruiz",
        "timestamp": "2025-11-01T08:30:00",
        "declared_pallets": 2,
    }
    created = await client.post("/api/v1/entradas/", json=payload, headers=auth_headers)
    assert created.status_code == 201
    assert created.json()["pallets"] == []

    listed = await client.get("/api/v1/entradas/", headers=auth_headers)
    assert listed.json()[0]["delivery_note_id"] == "ALB-E-20251101"
    assert len(listed.json()) == 4

    audit = await client.get("/api/v1/auditoria/", headers=auth_headers)
    assert [e["action"] for e in audit.json()][:2] == ["CREATE", "LOGIN"]


async def test_unknown_entity_returns_404(client, auth_headers):
    response = await client.get("/api/v1/packs/PACK404", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "ENTITY_NOT_FOUND"


async def test_inventory_csv_download(client, auth_headers):
    response = await client.get("/api/v1/reportes/inventario", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="reporte_inventario.csv"' in response.headers["content-disposition"]
    assert response.text.startswith("INVENTARIO DE PALLETS\r\n")


async def test_movements_report_without_range_is_400(client, auth_headers):
    response = await client.get("/api/v1/reportes/movimientos", params={"formato": "html"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_remote_failure_returns_502_and_error_notification(client, auth_headers, seeded_context):
    async with seeded_context.engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE incidencias")

    response = await client.post(
        "/api/v1/incidencias/",
        json={"category": "Stock", "description": "Caja rota"},
        headers=auth_headers,
    )

    assert response.status_code == 502
    assert response.json()["error"] == "REMOTE_CALL_FAILED"
    notifications = (await client.get("/api/v1/notificaciones/")).json()
    assert notifications[-1]["type"] == "error"
    assert notifications[-1]["message"].startswith("No se pudo reportar la incidencia")


async def test_connection_status(client):
    response = await client.get("/api/v1/status/")

    assert response.json() == {"status": "connected"}


async def test_label_search_and_stats(client, auth_headers):
    found = await client.get("/api/v1/etiquetas/buscar", params={"q": "PED-C-101"}, headers=auth_headers)
    assert [r["id"] for r in found.json()] == ["PACK001"]

    stats = await client.get("/api/v1/reportes/estadisticas", headers=auth_headers)
    assert stats.json()["incidents_by_status"]["Pendiente"] == 1


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/v1/usuarios/3", {"email": None}),
        ("/api/v1/entradas/ENT001", {"declared_pallets": None}),
        ("/api/v1/entradas/ENT001", {"delivery_note_id": None}),
        ("/api/v1/packs/PACK002", {"status": None}),
        ("/api/v1/salidas/SAL001", {"client": None}),
        ("/api/v1/incidencias/INC001", {"category": None}),
    ],
)
async def test_null_in_update_is_rejected_before_writing(client, auth_headers, seeded_context, path, payload):
    response = await client.put(path, json=payload, headers=auth_headers)

    assert response.status_code == 422
    assert [e.action.value for e in seeded_context.audit_log.entries] == ["LOGIN"]
    notifications = (await client.get("/api/v1/notificaciones/")).json()
    assert all(n["type"] != "error" for n in notifications)


async def test_entrada_incident_can_be_cleared_with_null(client, auth_headers):
    response = await client.put(
        "/api/v1/entradas/ENT001", json={"incident": None}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["incident"] is None
    assert response.json()["delivery_note_id"] == "ALB-E-20251013"


async def test_concurrent_logouts_store_every_audit_entry(client, auth_headers, seeded_context):
    responses = await asyncio.gather(
        *(client.post("/api/v1/auth/logout", headers=auth_headers) for _ in range(40))
    )

    assert all(r.status_code == 204 for r in responses)
    audit_log = seeded_context.audit_log
    stored = json.loads(audit_log.storage.get_item(audit_log.key))
    assert len(audit_log.entries) == 41
    assert len(stored) == 41
    assert [e["action"] for e in stored].count("LOGOUT") == 40


async def test_incidents_report_rejects_unknown_status(client, auth_headers):
    rejected = await client.get(
        "/api/v1/reportes/incidencias", params={"estado": "Cerrada"}, headers=auth_headers
    )
    assert rejected.status_code == 422

    accepted = await client.get(
        "/api/v1/reportes/incidencias", params={"estado": "Pendiente"}, headers=auth_headers
    )
    assert accepted.status_code == 200
    assert 'filename="reporte_incidencias_Pendiente.csv"' in accepted.headers["content-disposition"]


async def test_public_registration_always_gets_warehouse_role(client):
    response = await client.post(
        "/api/v1/auth/register",
        json={"name": "Intruso", "email": "intruso@vinos.com", "password": "x", "role": "SuperUsuario"},
    )

    assert response.status_code == 201
    assert response.json()["role"] == "Almacen"
