import pytest
from unittest.mock import AsyncMock, patch
from fastapi.templating import Jinja2Templates
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.models.user import User


class TestAuthController:
    """Test cases for login, registration and guest login endpoints."""

    @pytest.mark.asyncio
    async def test_login_page_renders_form(self, async_client: AsyncClient):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'action="/"' in response.text
        assert 'name="password"' in response.text

    @pytest.mark.asyncio
    async def test_register_page_renders_form(self, async_client: AsyncClient):
        response = await async_client.get("/register")

        assert response.status_code == 200
        assert 'action="/register"' in response.text
        assert 'name="username"' in response.text

    @pytest.mark.asyncio
    async def test_register_success(self, async_client: AsyncClient, db_session: AsyncSession):
        """Test successful user registration."""
        form = {"email": "new@x.com", "username": "newbie", "password": "secret"}

        response = await async_client.post("/register", data=form)

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        result = await db_session.execute(select(User).where(User.email == "new@x.com"))
        user = result.scalar_one()
        assert user.username == "newbie"
        assert user.password == "secret"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, async_client: AsyncClient, test_user: User, db_session: AsyncSession):
        """Test registration with duplicate email."""
        form = {"email": test_user.email, "username": "someone-else", "password": "pw"}

        response = await async_client.post("/register", data=form)

        assert response.status_code == 500
        assert response.json()["detail"] == "Unable to register user"
        count = await db_session.execute(select(func.count(User.id)))
        assert count.scalar() == 1

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, async_client: AsyncClient, test_user: User):
        form = {"email": "other@x.com", "username": test_user.username, "password": "pw"}

        response = await async_client.post("/register", data=form)

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_register_missing_fields(self, async_client: AsyncClient):
        """Test registration with missing required fields."""
        response = await async_client.post("/register", data={"email": "x@x.com"})

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert data["error_count"] == 2

    @pytest.mark.asyncio
    async def test_register_accepts_any_email_string(self, async_client: AsyncClient, db_session: AsyncSession):
        form = {"email": "alice", "username": "alice", "password": "pw"}

        response = await async_client.post("/register", data=form)

        assert response.status_code == 303
        result = await db_session.execute(select(User.email).where(User.username == "alice"))
        assert result.scalar_one() == "alice"

    @pytest.mark.asyncio
    async def test_login_success_sets_session_cookie(self, async_client: AsyncClient, test_user: User):
        """Test successful login."""
        form = {"email": "a@x.com", "password": "pw1"}

        response = await async_client.post("/", data=form)

        assert response.status_code == 303
        assert response.headers["location"] == "/forum"
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("user=")
        assert "a@x.com" in set_cookie
        assert "Path=/" in set_cookie
        assert "expires" not in set_cookie.lower()

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, async_client: AsyncClient, test_user: User):
        """Test login with wrong password."""
        form = {"email": "a@x.com", "password": "wrong"}

        response = await async_client.post("/", data=form)

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid password"
        assert "set-cookie" not in response.headers

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, async_client: AsyncClient):
        """Test login with non-existent user."""
        form = {"email": "nobody@x.com", "password": "pw"}

        response = await async_client.post("/", data=form)

        assert response.status_code == 401
        assert response.json()["detail"] == "user not found"

    @pytest.mark.asyncio
    async def test_guest_login(self, async_client: AsyncClient):
        response = await async_client.get("/guestLogin")

        assert response.status_code == 303
        assert response.headers["location"] == "/forum"
        assert response.headers["set-cookie"].startswith("user=guest;")

    @pytest.mark.asyncio
    async def test_guest_login_ignores_failed_ping(self, async_client: AsyncClient):
        with patch("forum.controllers.auth_controller.ping", new=AsyncMock(side_effect=RuntimeError("down"))):
            response = await async_client.get("/guestLogin")

        assert response.status_code == 303
        assert response.headers["set-cookie"].startswith("user=guest;")

    @pytest.mark.asyncio
    async def test_other_methods_fall_through(self, async_client: AsyncClient):
        response = await async_client.put("/register")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_missing_template_is_server_error(self, async_client: AsyncClient, tmp_path):
        with patch("forum.utils.templating.templates", Jinja2Templates(directory=str(tmp_path))):
            response = await async_client.get("/register")

        assert response.status_code == 500
        assert response.json()["detail"] == "Unable to render template register.html"

    @pytest.mark.asyncio
    async def test_login_unknown_plain_identity(self, async_client: AsyncClient):
        response = await async_client.post("/", data={"email": "nobody", "password": "pw"})

        assert response.status_code == 401
        assert response.json()["detail"] == "user not found"

    @pytest.mark.asyncio
    async def test_unknown_path_renders_login_page(self, async_client: AsyncClient):
        response = await async_client.get("/anything/else")

        assert response.status_code == 200
        assert 'action="/"' in response.text
        assert 'name="password"' in response.text

    @pytest.mark.asyncio
    async def test_unknown_path_post_logs_in(self, async_client: AsyncClient, test_user: User):
        response = await async_client.post("/anything", data={"email": "a@x.com", "password": "pw1"})

        assert response.status_code == 303
        assert response.headers["location"] == "/forum"
        assert response.headers["set-cookie"].startswith("user=")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["HEAD", "OPTIONS", "PUT"])
    async def test_unhandled_methods_on_login_page(self, method: str, async_client: AsyncClient):
        response = await async_client.request(method, "/")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_post_guest_login_is_empty_ok(self, async_client: AsyncClient):
        response = await async_client.post("/guestLogin")

        assert response.status_code == 200
        assert response.content == b""
        assert "set-cookie" not in response.headers
