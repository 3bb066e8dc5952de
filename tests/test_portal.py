from datetime import date, datetime, timedelta

from app.db.models.check_in import CheckIn
from app.db.models.photo import Photo
from app.db.models.project import Project
from app.db.models.task import TaskStatus
from app.db.models.user import Role
from app.services import portal

from conftest import login, make_project, make_task, make_user


class TestBudgetSummary:
    def test_within_budget(self):
        summary = portal.budget_summary(Project(budget=10000, spent=2500))
        assert summary["remaining"] == 7500
        assert summary["percent"] == 25.0
        assert summary["level"] == "ok"
        assert not summary["is_over_budget"]

    def test_warning_above_eighty_percent(self):
        assert portal.budget_summary(Project(budget=1000, spent=850))["level"] == "warning"

    def test_overrun_is_flagged_not_refused(self):
        summary = portal.budget_summary(Project(budget=1000, spent=1200))
        assert summary["is_over_budget"]
        assert summary["level"] == "over"
        assert summary["remaining"] == -200
        assert summary["bar_percent"] == 100

    def test_zero_budget(self):
        summary = portal.budget_summary(Project(budget=0, spent=0))
        assert summary["percent"] == 0
        assert not summary["is_over_budget"]


class TestDaysRemaining:
    def test_future_date(self):
        project = Project(expected_end_date=date(2024, 6, 30))
        assert portal.days_remaining(project, date(2024, 6, 20)) == 10

    def test_late_is_negative(self):
        project = Project(expected_end_date=date(2024, 6, 1))
        assert portal.days_remaining(project, date(2024, 6, 4)) == -3

    def test_without_date(self):
        assert portal.days_remaining(Project(), date(2024, 6, 4)) is None


class TestClientProjects:
    def test_client_sees_only_own_projects(self, db_session, client_user, project):
        other_client = make_user(db_session, Role.CLIENT, email="other@example.com")
        make_project(db_session, client=other_client, name="Alheia")

        projects = portal.client_projects(db_session, client_user)

        assert [p["project"].id for p in projects] == [project.id]

    def test_details_show_approved_photos_and_active_workers(self, db_session, client_user, project, worker):
        approved = make_task(db_session, project, worker, status=TaskStatus.APPROVED)
        make_task(db_session, project, worker, title="Aberta")
        db_session.add(Photo(project_id=project.id, task_id=approved.id, photo_url="/a.jpg", is_approved=True))
        db_session.add(Photo(project_id=project.id, photo_url="/b.jpg", is_approved=False))
        db_session.add(CheckIn(worker_id=worker.id, project_id=project.id, check_in_time=datetime.utcnow()))
        db_session.commit()

        details = portal.client_project(db_session, client_user, project.id, today=date.today())

        assert [p.photo_url for p in details["photos"]] == ["/a.jpg"]
        assert details["active_workers"] == 1
        assert details["completed_tasks"] == 1
        assert details["total_tasks"] == 2
        assert details["days_remaining"] == 20

    def test_other_clients_project_is_none(self, db_session, project):
        stranger = make_user(db_session, Role.CLIENT, email="stranger@example.com")
        assert portal.client_project(db_session, stranger, project.id) is None


class TestClientRoutes:
    def test_portal_opens_first_project(self, client, client_user, project):
        login(client, client_user)
        page = client.get("/client/")
        assert page.status_code == 200
        assert project.name in page.text
        assert f'class="card project-detail" data-project-id="{project.id}"' in page.text

    def test_over_budget_flag_rendered(self, client, db_session, client_user, project):
        project.spent = project.budget + 1
        db_session.commit()
        login(client, client_user)
        assert "data-over-budget" in client.get(f"/client/projects/{project.id}").text

    def test_late_project_shows_days_late(self, client, db_session, client_user, project):
        project.expected_end_date = date.today() - timedelta(days=3)
        db_session.commit()
        login(client, client_user)
        assert "data-days-late" in client.get(f"/client/projects/{project.id}").text

    def test_other_clients_project_is_not_found(self, client, db_session, project):
        stranger = make_user(db_session, Role.CLIENT, email="stranger@example.com")
        login(client, stranger)
        assert client.get(f"/client/projects/{project.id}").status_code == 404

    def test_client_without_projects(self, client, db_session):
        lonely = make_user(db_session, Role.CLIENT, email="lonely@example.com")
        login(client, lonely)
        page = client.get("/client/")
        assert page.status_code == 200
        assert "project-detail" not in page.text
