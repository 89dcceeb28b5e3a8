"""
Tests for Authors API Endpoints

Tests for /api/authors endpoints. Reads need the Customer role,
writes need the Administrator role.
"""

from fastapi import status

from bookstore.models import Role
from bookstore.repositories import AuthorRepository


class TestAuthorsRoleGuard:
    """Access control on /api/authors."""

    def test_list_without_token_is_unauthorized(self, client):
        response = client.get("/api/authors")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token_is_unauthorized(self, client):
        response = client.get(
            "/api/authors",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_without_roles_is_forbidden(self, client, auth_headers):
        response = client.get("/api/authors", headers=auth_headers())

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_administrator_only_token_cannot_read(self, client, auth_headers):
        """Reading requires Customer; Administrator alone is not enough."""
        response = client.get(
            "/api/authors",
            headers=auth_headers(Role.ADMINISTRATOR),
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_customer_cannot_create(self, client, customer_headers):
        response = client.post(
            "/api/authors",
            json={"firstName": "Jane", "lastName": "Austen"},
            headers=customer_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_customer_cannot_delete(self, client, customer_headers, sample_author):
        response = client.delete(
            f"/api/authors/{sample_author.id}",
            headers=customer_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_forbidden_request_changes_nothing(
        self, client, customer_headers, sample_author
    ):
        client.put(
            f"/api/authors/{sample_author.id}",
            json={"id": sample_author.id, "firstName": "Eric", "lastName": "Blair"},
            headers=customer_headers,
        )

        response = client.get(
            f"/api/authors/{sample_author.id}",
            headers=customer_headers,
        )
        assert response.json()["firstName"] == "George"


class TestListAuthors:
    """Tests for GET /api/authors."""

    def test_list_authors_empty(self, client, customer_headers):
        response = client.get("/api/authors", headers=customer_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors_with_data(self, client, customer_headers, sample_book):
        response = client.get("/api/authors", headers=customer_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["firstName"] == "George"
        assert data[0]["lastName"] == "Orwell"
        assert data[0]["books"][0]["title"] == "1984"

    def test_list_accepts_ui_path_casing(self, client, customer_headers, sample_author):
        """The UI client calls api/Authors."""
        response = client.get("/api/Authors/", headers=customer_headers)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 1


class TestGetAuthor:
    """Tests for GET /api/authors/{author_id}."""

    def test_get_author_success(self, client, customer_headers, sample_author):
        response = client.get(
            f"/api/authors/{sample_author.id}",
            headers=customer_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_author.id
        assert data["firstName"] == "George"
        assert data["bio"].startswith("English novelist")

    def test_get_author_not_found(self, client, customer_headers):
        response = client.get("/api/authors/999", headers=customer_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Author with id 999 not found"

    def test_get_author_non_integer_id(self, client, customer_headers):
        response = client.get("/api/authors/abc", headers=customer_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "author_id"


class TestCreateAuthor:
    """Tests for POST /api/authors."""

    def test_create_author_minimal(self, client, admin_headers):
        response = client.post(
            "/api/authors",
            json={"firstName": "A", "lastName": "B"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] >= 1
        assert data["firstName"] == "A"
        assert data["lastName"] == "B"
        assert data["bio"] is None
        assert data["books"] == []

    def test_created_author_reads_back_unchanged(self, client, admin_headers):
        """Every field sent on create comes back from a later get."""
        author_data = {
            "firstName": "Jane",
            "lastName": "Austen",
            "bio": "English novelist of the landed gentry.",
        }
        created = client.post(
            "/api/authors",
            json=author_data,
            headers=admin_headers,
        ).json()

        response = client.get(f"/api/authors/{created['id']}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        for field, value in author_data.items():
            assert data[field] == value
        assert data["id"] == created["id"]

    def test_create_author_malformed_json(self, client, admin_headers):
        response = client.post(
            "/api/authors",
            content=b"{bad",
            headers={**admin_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"] == [
            {"field": "body", "message": "JSON decode error"}
        ]

    def test_create_author_blank_name(self, client, admin_headers):
        response = client.post(
            "/api/authors",
            json={"firstName": "   ", "lastName": "Austen"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = [error["field"] for error in response.json()["errors"]]
        assert "firstName" in fields

    def test_create_author_name_too_long(self, client, admin_headers):
        response = client.post(
            "/api/authors",
            json={"firstName": "x" * 51, "lastName": "Austen"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_author_missing_body(self, client, admin_headers):
        response = client.post("/api/authors", headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "body"

    def test_create_author_store_failure(self, client, admin_headers, monkeypatch):
        monkeypatch.setattr(AuthorRepository, "create", lambda self, entity: False)

        response = client.post(
            "/api/authors",
            json={"firstName": "Jane", "lastName": "Austen"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == (
            "Something went wrong. Please contact the administrator"
        )

    def test_unexpected_error_hides_details(
        self, server_error_client, admin_headers, monkeypatch
    ):
        def explode(self, entity):
            raise RuntimeError("secret internal detail")

        monkeypatch.setattr(AuthorRepository, "create", explode)

        response = server_error_client.post(
            "/api/authors",
            json={"firstName": "Jane", "lastName": "Austen"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "detail": "Something went wrong. Please contact the administrator"
        }
        assert "secret internal detail" not in response.text


class TestUpdateAuthor:
    """Tests for PUT /api/authors/{author_id}."""

    def test_update_author_success(self, client, admin_headers, sample_author):
        response = client.put(
            f"/api/authors/{sample_author.id}",
            json={"id": sample_author.id, "firstName": "Eric", "lastName": "Blair"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        data = client.get(
            f"/api/authors/{sample_author.id}",
            headers=admin_headers,
        ).json()
        assert data["firstName"] == "Eric"
        assert data["lastName"] == "Blair"
        # Full replacement: the omitted bio is cleared
        assert data["bio"] is None

    def test_update_author_id_mismatch(self, client, admin_headers, sample_author):
        response = client.put(
            f"/api/authors/{sample_author.id}",
            json={"id": sample_author.id + 1, "firstName": "Eric", "lastName": "Blair"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "id"

    def test_update_author_zero_id(self, client, admin_headers):
        response = client.put(
            "/api/authors/0",
            json={"id": 0, "firstName": "Eric", "lastName": "Blair"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_not_found(self, client, admin_headers):
        response = client.put(
            "/api/authors/999",
            json={"id": 999, "firstName": "Eric", "lastName": "Blair"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_author_store_failure(
        self, client, admin_headers, sample_author, monkeypatch
    ):
        monkeypatch.setattr(AuthorRepository, "update", lambda self, entity: False)

        response = client.put(
            f"/api/authors/{sample_author.id}",
            json={"id": sample_author.id, "firstName": "Eric", "lastName": "Blair"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


class TestDeleteAuthor:
    """Tests for DELETE /api/authors/{author_id}."""

    def test_delete_author_success(self, client, admin_headers, sample_author):
        response = client.delete(
            f"/api/authors/{sample_author.id}",
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT

        get_response = client.get(
            f"/api/authors/{sample_author.id}",
            headers=admin_headers,
        )
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_twice(self, client, admin_headers, sample_author):
        first = client.delete(f"/api/authors/{sample_author.id}", headers=admin_headers)
        second = client.delete(f"/api/authors/{sample_author.id}", headers=admin_headers)

        assert first.status_code == status.HTTP_204_NO_CONTENT
        assert second.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_keeps_books(self, client, admin_headers, sample_book):
        author_id = sample_book.author_id

        client.delete(f"/api/authors/{author_id}", headers=admin_headers)

        response = client.get(f"/api/books/{sample_book.id}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["authorId"] is None
        assert response.json()["author"] is None

    def test_delete_author_zero_id(self, client, admin_headers):
        response = client.delete("/api/authors/0", headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_author_store_failure(
        self, client, admin_headers, sample_author, monkeypatch
    ):
        monkeypatch.setattr(AuthorRepository, "delete", lambda self, entity: False)

        response = client.delete(
            f"/api/authors/{sample_author.id}",
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
