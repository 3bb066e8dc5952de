from app.db.models.project import Project
from app.db.models.task import Task
from app.db.models.user import Account, Role
from app.services import auth as auth_service
from app.services import check_ins as check_in_service

from create_user import seed


def test_seed_creates_demo_accounts_and_site(db_session):
    seed(db_session)

    assert db_session.query(Account).count() == 3
    admin = auth_service.sign_in(db_session, "admin@alaobra.com", "admin123")
    assert admin.profile.role == Role.ADMIN

    worker = db_session.query(Account).filter(Account.email == "worker@alaobra.com").one().profile
    assert [p.name for p in check_in_service.available_projects(db_session, worker)] == ["Casa Demo"]


def test_seed_is_idempotent(db_session):
    seed(db_session)
    seed(db_session)
    assert db_session.query(Account).count() == 3
    assert db_session.query(Project).count() == 1
    assert db_session.query(Task).count() == 1
