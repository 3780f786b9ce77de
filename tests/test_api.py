from datetime import UTC, datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from backend.app.core.security import create_access_token
from backend.app.services.book_service import BookService

SEED_PASSWORD = "seed-password"


def _borrower_request(**overrides) -> dict:
    body = {
        "name": "Ayesha",
        "phone": "9876543210",
        "address": "12 Market Road",
        "standard": 5,
        "requestType": "individual",
        "books": [{"title": "Maths Part 1", "subject": "Maths"}],
    }
    body.update(overrides)
    return body


# ==================== 登录 ====================


def test_login_returns_token(client):
    response = client.post(
        "/api/admin/login",
        json={"username": "danish", "password": SEED_PASSWORD},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["admin"] == "danish"
    assert body["token"]


def test_login_failures_do_not_reveal_which_check_failed(client):
    wrong_password = client.post(
        "/api/admin/login",
        json={"username": "danish", "password": "not-it"},
    )
    unknown_user = client.post(
        "/api/admin/login",
        json={"username": "ghost", "password": SEED_PASSWORD},
    )

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {
        "success": False,
        "message": "Invalid credentials",
    }


def test_login_validation_error_format(client):
    response = client.post("/api/admin/login", json={"username": "danish"})

    assert response.status_code == 422
    assert response.json() == {"success": False, "message": "password is required"}


def test_login_with_overlong_multibyte_password_is_invalid_credentials(client):
    response = client.post(
        "/api/admin/login",
        json={"username": "danish", "password": "é" * 72},
    )

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


# ==================== 授权 ====================


def test_protected_route_without_token_skips_handler(client, monkeypatch):
    calls = []

    async def fake_add_books(self, books, added_by):
        calls.append(books)
        return []

    monkeypatch.setattr(BookService, "add_books", fake_add_books)

    response = client.post(
        "/api/admin/books",
        json={"books": [{"title": "Science", "subject": "Science", "standard": 4}]},
    )

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Access token required"}
    assert calls == []


def test_non_bearer_authorization_is_missing_token(client):
    response = client.get(
        "/api/admin/requests", headers={"Authorization": "Basic Zm9vOmJhcg=="}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Access token required"


def test_invalid_and_expired_tokens_look_the_same(client):
    forged = create_access_token(1, "furqan", secret="not-the-server-secret")
    expired = create_access_token(
        1, "furqan", now=datetime.now(UTC) - timedelta(hours=25)
    )

    responses = [
        client.get("/api/admin/requests", headers={"Authorization": f"Bearer {t}"})
        for t in (forged, expired, "garbage")
    ]

    for response in responses:
        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Invalid token"}


# ==================== 借书申请 ====================


def test_borrower_requests_get_sequential_ids(client):
    ids = []
    for _ in range(3):
        response = client.post("/api/borrower-requests", json=_borrower_request())
        assert response.status_code == 201
        assert response.json()["success"] is True
        ids.append(response.json()["requestId"])

    assert ids == [1, 2, 3]


def test_borrower_request_rejects_unknown_type(client):
    response = client.post(
        "/api/borrower-requests", json=_borrower_request(requestType="everything")
    )

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_admin_lists_requests_newest_first(client, auth_headers):
    client.post("/api/borrower-requests", json=_borrower_request(name="First"))
    client.post(
        "/api/borrower-requests",
        json=_borrower_request(name="Second", requestType="full-set", books=[]),
    )

    response = client.get("/api/admin/requests", headers=auth_headers)

    assert response.status_code == 200
    requests = response.json()["requests"]
    assert [r["name"] for r in requests] == ["Second", "First"]
    assert [r["requestId"] for r in requests] == [2, 1]
    assert requests[0]["requestType"] == "full-set"
    assert requests[1]["books"] == [{"title": "Maths Part 1", "subject": "Maths"}]
    assert requests[1]["status"] == "pending"


# ==================== 教材 ====================


def test_added_books_are_stamped_with_token_identity(client, auth_headers):
    response = client.post(
        "/api/admin/books",
        headers=auth_headers,
        json={
            "books": [
                {"title": "English Reader", "subject": "English", "standard": 3},
                {"title": "Maths Part 1", "subject": "Maths", "standard": 2},
                {"title": "EVS", "subject": "EVS", "standard": 3},
            ]
        },
    )
    assert response.status_code == 201
    assert response.json() == {"success": True, "message": "Books added successfully"}

    books = client.get("/api/books").json()["books"]
    assert [(b["standard"], b["subject"]) for b in books] == [
        (2, "Maths"),
        (3, "EVS"),
        (3, "English"),
    ]
    assert {b["addedBy"] for b in books} == {"furqan"}

    third = client.get("/api/books/3").json()["books"]
    assert [b["title"] for b in third] == ["EVS", "English Reader"]


def test_add_books_requires_at_least_one_book(client, auth_headers):
    response = client.post("/api/admin/books", headers=auth_headers, json={"books": []})

    assert response.status_code == 422


# ==================== 修改密码 ====================


def test_change_password_flow(client, auth_headers):
    wrong = client.post(
        "/api/admin/change-password",
        headers=auth_headers,
        json={"currentPassword": "nope", "newPassword": "brand-new-pass"},
    )
    assert wrong.status_code == 401
    assert wrong.json()["success"] is False

    ok = client.post(
        "/api/admin/change-password",
        headers=auth_headers,
        json={"currentPassword": SEED_PASSWORD, "newPassword": "brand-new-pass"},
    )
    assert ok.status_code == 200
    assert ok.json() == {"success": True, "message": "Password changed successfully"}

    old_login = client.post(
        "/api/admin/login",
        json={"username": "furqan", "password": SEED_PASSWORD},
    )
    new_login = client.post(
        "/api/admin/login",
        json={"username": "furqan", "password": "brand-new-pass"},
    )
    assert old_login.status_code == 401
    assert new_login.status_code == 200

    # 改密前签发的令牌在过期前仍然有效
    still_valid = client.get("/api/admin/requests", headers=auth_headers)
    assert still_valid.status_code == 200


def test_change_password_for_unknown_admin(client):
    token = create_access_token(999, "ghost")

    response = client.post(
        "/api/admin/change-password",
        headers={"Authorization": f"Bearer {token}"},
        json={"currentPassword": "anything", "newPassword": "brand-new-pass"},
    )

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Admin not found"}


# ==================== 其他 ====================


def test_storage_error_is_generic(client, monkeypatch):
    async def broken_list_books(self, standard=None):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(BookService, "list_books", broken_list_books)

    response = client.get("/api/books")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Storage error"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/health/detailed").json()["database"] == "connected"


def test_change_password_rejects_new_password_over_72_bytes(client, auth_headers):
    response = client.post(
        "/api/admin/change-password",
        headers=auth_headers,
        json={"currentPassword": SEED_PASSWORD, "newPassword": "é" * 72},
    )

    assert response.status_code == 422
    assert response.json()["success"] is False
    login = client.post(
        "/api/admin/login",
        json={"username": "furqan", "password": SEED_PASSWORD},
    )
    assert login.status_code == 200


def test_unknown_api_path_is_not_served_the_frontend(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_frontend_routes_fall_back_to_index(client):
    response = client.get("/admin/dashboard")

    assert response.status_code == 200
    assert "books" in response.text
