import pytest

from app.core.errors import AuthError
from app.core.security import create_access_token, decode_access_token, get_password_hash, verify_password
from app.db.models.user import Account, Profile, Role
from app.services import auth as auth_service

from conftest import login, make_user


class TestSecurity:
    def test_password_hash_round_trip(self):
        hashed = get_password_hash("admin123")
        assert hashed != "admin123"
        assert verify_password("admin123", hashed)
        assert not verify_password("wrong", hashed)

    def test_decode_strips_bearer_prefix(self):
        token = create_access_token(data={"sub": "7"})
        assert decode_access_token(f"Bearer {token}")["sub"] == "7"

    def test_decode_invalid_token_returns_none(self):
        assert decode_access_token("Bearer not-a-jwt") is None


class TestSignIn:
    def test_sign_in_normalizes_email(self, db_session):
        make_user(db_session, Role.ADMIN, email="boss@alaobra.com", password="admin123")
        account = auth_service.sign_in(db_session, "  Boss@AlaObra.com ", "admin123")
        assert account.email == "boss@alaobra.com"
        assert account.last_sign_in_at is not None

    def test_wrong_password_is_generic_error(self, db_session):
        make_user(db_session, Role.ADMIN, email="boss@alaobra.com", password="admin123")
        with pytest.raises(AuthError) as exc:
            auth_service.sign_in(db_session, "boss@alaobra.com", "nope")
        assert exc.value.message_key == "auth.invalid_credentials"

    def test_unknown_email_is_same_error(self, db_session):
        with pytest.raises(AuthError) as exc:
            auth_service.sign_in(db_session, "ghost@alaobra.com", "nope")
        assert exc.value.message_key == "auth.invalid_credentials"

    def test_sign_up_rejects_duplicate_email(self, db_session):
        make_user(db_session, Role.WORKER, email="w@alaobra.com")
        with pytest.raises(AuthError) as exc:
            make_user(db_session, Role.WORKER, email="W@alaobra.com")
        assert exc.value.message_key == "users.email_taken"

    def test_missing_profile_is_created_with_default_role(self, db_session):
        account = Account(email="orphan@alaobra.com", hashed_password=get_password_hash("x"))
        db_session.add(account)
        db_session.commit()

        profile = auth_service.load_profile(db_session, account)

        assert profile.id == account.id
        assert profile.role == Role.WORKER
        assert profile.full_name == "orphan"
        assert db_session.query(Profile).count() == 1


class TestLoginRoutes:
    def test_login_redirects_to_role_home(self, client, db_session):
        make_user(db_session, Role.WORKER, email="worker@alaobra.com", password="worker123")

        response = client.post("/login", data={"email": "worker@alaobra.com", "password": "worker123"}, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert "access_token" in response.cookies

        home = client.get("/", follow_redirects=False)
        assert home.status_code == 303
        assert home.headers["location"] == "/worker"

    def test_login_failure_shows_error(self, client):
        response = client.post("/login", data={"email": "x@alaobra.com", "password": "bad"}, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/?error=invalid_credentials"

        page = client.get("/?error=invalid_credentials")
        assert "Email ou senha incorretos" in page.text

    def test_empty_form_is_refused_without_validation_error(self, client):
        response = client.post("/login", data={}, follow_redirects=False)
        assert response.status_code == 303
        assert "invalid_credentials" in response.headers["location"]

    def test_protected_page_redirects_to_login(self, client):
        response = client.get("/admin/", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/?error=login_required"

    def test_invalid_token_redirects(self, client):
        client.cookies.set("access_token", "Bearer garbage")
        response = client.get("/worker/", follow_redirects=False)
        assert response.headers["location"] == "/?error=invalid_token"

    def test_wrong_role_is_forbidden(self, client, worker):
        login(client, worker)
        assert client.get("/admin/").status_code == 403
        assert client.get("/client/").status_code == 403

    def test_logout_clears_session(self, client, admin):
        login(client, admin)
        response = client.get("/logout", follow_redirects=False)
        assert response.status_code == 303
        set_cookie = response.headers["set-cookie"]
        assert "access_token=" in set_cookie
        assert "Max-Age=0" in set_cookie

    def test_inactive_profile_is_signed_out(self, client, db_session, worker):
        worker.is_active = False
        db_session.commit()
        login(client, worker)
        response = client.get("/worker/", follow_redirects=False)
        assert response.headers["location"] == "/?error=user_not_found"

    def test_update_own_profile(self, client, db_session, worker):
        login(client, worker)
        response = client.post("/profile", data={"full_name": "João Silva", "phone": "912345678"}, follow_redirects=False)
        assert response.cookies.get("toast_message") == "profile.updated"
        db_session.refresh(worker)
        assert worker.full_name == "João Silva"
        assert worker.phone == "912345678"
