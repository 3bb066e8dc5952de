import pytest

from app.core.errors import WorkflowError
from app.db.models.issue import Issue, IssueStatus, Severity
from app.db.models.notification import Notification, NotificationType
from app.db.models.user import Role
from app.services import issues as issue_service

from conftest import login, make_project, make_user


class TestReportIssue:
    def test_report_notifies_every_admin(self, db_session, admin, worker, project, task):
        second_admin = make_user(db_session, Role.ADMIN, email="admin2@example.com")

        issue = issue_service.report_issue(db_session, worker, project.id, "Fuga de água", "Na cave", Severity.HIGH)

        assert issue.status == IssueStatus.OPEN
        notes = db_session.query(Notification).filter(Notification.type == NotificationType.ALERT).all()
        assert sorted(n.user_id for n in notes) == sorted([admin.id, second_admin.id])
        assert all(worker.full_name in n.message for n in notes)

    def test_requires_project_and_title(self, db_session, worker, project, task):
        with pytest.raises(WorkflowError) as exc:
            issue_service.report_issue(db_session, worker, project.id, "  ")
        assert exc.value.message_key == "issues.required_fields"
        with pytest.raises(WorkflowError):
            issue_service.report_issue(db_session, worker, None, "Fuga")

    def test_unknown_severity_refused(self, db_session, worker, project, task):
        with pytest.raises(WorkflowError):
            issue_service.report_issue(db_session, worker, project.id, "Fuga", severity="apocalyptic")

    def test_worker_only_reports_on_assigned_projects(self, db_session, admin, worker, task):
        other = make_project(db_session, name="Alheia")
        with pytest.raises(WorkflowError) as exc:
            issue_service.report_issue(db_session, worker, other.id, "Fuga")
        assert exc.value.message_key == "worker.project_not_available"
        assert db_session.query(Notification).count() == 0

    def test_resolve_once(self, db_session, worker, project, task):
        issue = issue_service.report_issue(db_session, worker, project.id, "Fuga")
        issue_service.resolve_issue(db_session, issue)
        assert issue.status == IssueStatus.RESOLVED
        assert issue.resolved_at is not None
        with pytest.raises(WorkflowError) as exc:
            issue_service.resolve_issue(db_session, issue)
        assert exc.value.message_key == "issues.already_resolved"

    def test_unresolved_listing(self, db_session, worker, project, task):
        open_issue = issue_service.report_issue(db_session, worker, project.id, "Aberto")
        done = issue_service.report_issue(db_session, worker, project.id, "Feito")
        issue_service.resolve_issue(db_session, done)

        assert [i.id for i in issue_service.unresolved_issues(db_session)] == [open_issue.id]
        assert [i.id for i in issue_service.all_issues(db_session, IssueStatus.RESOLVED)] == [done.id]
        assert len(issue_service.all_issues(db_session)) == 2


class TestIssueRoutes:
    def test_worker_reports_with_photos(self, client, db_session, admin, worker, project, task):
        login(client, worker)
        form = client.get(f"/worker/issues/new?project_id={project.id}")
        assert form.status_code == 200
        assert 'enctype="multipart/form-data"' in form.text

        response = client.post(
            "/worker/issues/new",
            data={"project_id": project.id, "title": "Fissura", "severity": Severity.CRITICAL},
            files=[
                ("photos", ("a.jpg", b"\xff\xd8one", "image/jpeg")),
                ("photos", ("b.png", b"\x89PNGtwo", "image/png")),
            ],
            follow_redirects=False,
        )

        assert response.headers["location"] == "/worker"
        assert response.cookies.get("toast_message") == "issues.reported"
        issue = db_session.query(Issue).one()
        assert issue.severity == Severity.CRITICAL
        assert len(issue.photo_urls) == 2
        assert db_session.query(Notification).filter(Notification.user_id == admin.id).count() == 1

    def test_worker_reports_without_photos(self, client, db_session, worker, project, task):
        login(client, worker)
        response = client.post(
            "/worker/issues/new",
            data={"project_id": project.id, "title": "Sem luz", "description": "Quadro elétrico"},
            follow_redirects=False,
        )
        assert response.cookies.get("toast_message") == "issues.reported"
        assert db_session.query(Issue).one().photo_urls is None

    def test_missing_title_goes_back_to_form(self, client, db_session, worker, project, task):
        login(client, worker)
        response = client.post("/worker/issues/new", data={"project_id": project.id}, follow_redirects=False)
        assert response.headers["location"] == "/worker/issues/new"
        assert response.cookies.get("toast_message") == "issues.required_fields"

    def test_refused_report_keeps_no_uploads(self, client, db_session, worker, project, task, tmp_path):
        login(client, worker)
        response = client.post(
            "/worker/issues/new",
            data={"project_id": project.id, "title": "  "},
            files=[("photos", ("a.jpg", b"\xff\xd8one", "image/jpeg"))],
            follow_redirects=False,
        )
        assert response.cookies.get("toast_message") == "issues.required_fields"
        assert [p for p in tmp_path.rglob("*") if p.is_file()] == []

    def test_bad_second_photo_discards_the_first(self, client, db_session, worker, project, task, tmp_path):
        login(client, worker)
        response = client.post(
            "/worker/issues/new",
            data={"project_id": project.id, "title": "Fissura"},
            files=[
                ("photos", ("a.jpg", b"\xff\xd8one", "image/jpeg")),
                ("photos", ("notes.txt", b"hello", "text/plain")),
            ],
            follow_redirects=False,
        )
        assert response.cookies.get("toast_message") == "upload.invalid_type"
        assert db_session.query(Issue).count() == 0
        assert [p for p in tmp_path.rglob("*") if p.is_file()] == []

    def test_admin_lists_and_resolves(self, client, db_session, admin, worker, project, task):
        issue = issue_service.report_issue(db_session, worker, project.id, "Fuga")
        login(client, admin)
        assert "Fuga" in client.get("/issues/").text

        response = client.post(f"/issues/{issue.id}/resolve?origin=/issues", follow_redirects=False)
        assert response.headers["location"] == "/issues"
        assert response.cookies.get("toast_message") == "issues.resolved"

        again = client.post(f"/issues/{issue.id}/resolve", follow_redirects=False)
        assert again.cookies.get("toast_message") == "issues.already_resolved"

    def test_resolve_ignores_foreign_origin(self, client, db_session, admin, worker, project, task):
        issue = issue_service.report_issue(db_session, worker, project.id, "Fuga")
        login(client, admin)
        response = client.post(f"/issues/{issue.id}/resolve?origin=https://evil.example", follow_redirects=False)
        assert response.headers["location"] == "/issues"
