from app.db.changes import ChangeFeed, feed
from app.db.models.notification import Notification, NotificationType
from app.db.models.project import Project
from app.db.models.user import Role
from app.services import notifications as notification_service

from conftest import login, make_project, make_user


class TestNotificationService:
    def test_notify_uses_string_table(self, db_session, worker):
        notification_service.notify(db_session, worker.id, "task_assigned", NotificationType.INFO, title="Pintar")
        db_session.commit()
        note = db_session.query(Notification).one()
        assert note.title == "Nova tarefa"
        assert "Pintar" in note.message

    def test_unread_count_and_mark_read(self, db_session, worker):
        for title in ("A", "B"):
            notification_service.notify(db_session, worker.id, "task_assigned", NotificationType.INFO, title=title)
        db_session.commit()
        assert notification_service.unread_count(db_session, worker) == 2

        latest = notification_service.recent_for(db_session, worker)[0]
        notification_service.mark_read(db_session, worker, latest.id)
        assert notification_service.unread_count(db_session, worker) == 1

    def test_admin_ids_skip_inactive(self, db_session, admin):
        retired = make_user(db_session, Role.ADMIN, email="retired@example.com")
        retired.is_active = False
        db_session.commit()
        assert notification_service.admin_ids(db_session) == [admin.id]


class TestNotificationRoutes:
    def test_list_and_mark_read(self, client, db_session, worker):
        notification_service.notify(db_session, worker.id, "task_assigned", NotificationType.INFO, link="/worker", title="Pintar")
        db_session.commit()
        login(client, worker)

        data = client.get("/notifications").json()
        assert data["unread"] == 1
        note_id = data["notifications"][0]["id"]
        assert data["notifications"][0]["link"] == "/worker"

        assert client.post(f"/notifications/{note_id}/read").json() == {"id": note_id, "is_read": True}
        assert client.get("/notifications").json()["unread"] == 0

    def test_cannot_read_someone_elses(self, client, db_session, worker, admin):
        notification_service.notify(db_session, admin.id, "task_assigned", NotificationType.INFO, title="X")
        db_session.commit()
        note = db_session.query(Notification).one()
        login(client, worker)
        assert client.post(f"/notifications/{note.id}/read").status_code == 404

    def test_requires_login(self, client):
        response = client.get("/notifications", follow_redirects=False)
        assert response.status_code == 303


class TestChangeFeed:
    def test_since_filters_by_sequence_and_table(self):
        local = ChangeFeed(maxlen=10)
        local.publish("tasks", 1, "insert")
        seq = local.publish("projects", 2, "update")
        local.publish("tasks", 1, "update")

        result = local.since(seq, ["tasks"])

        assert result["last_seq"] == 3
        assert result["reset"] is False
        assert [c["action"] for c in result["changes"]] == ["update"]

    def test_reset_when_events_were_dropped(self):
        local = ChangeFeed(maxlen=2)
        for i in range(5):
            local.publish("tasks", i, "insert")
        assert local.since(1)["reset"] is True
        assert local.since(3)["reset"] is False

    def test_commit_publishes_changes(self, db_session):
        before = feed.last_seq
        project = make_project(db_session, name="Nova")

        changes = feed.since(before, ["projects"])["changes"]

        assert {"table": "projects", "id": project.id, "action": "insert"}.items() <= changes[0].items()

    def test_rollback_publishes_nothing(self, db_session):
        before = feed.last_seq
        db_session.add(Project(name="Descartada", address="Rua"))
        db_session.flush()
        db_session.rollback()
        assert feed.since(before)["changes"] == []

    def test_changes_endpoint(self, client, db_session, admin, project):
        login(client, admin)
        start = client.get("/changes").json()["last_seq"]
        project.progress_percentage = 90
        db_session.commit()

        data = client.get(f"/changes?since={start}&tables=projects,tasks").json()

        assert [(c["table"], c["id"], c["action"]) for c in data["changes"]] == [("projects", project.id, "update")]

    def test_since_limits_to_projects(self):
        local = ChangeFeed(maxlen=10)
        local.publish("tasks", 1, "update", project_id=7)
        local.publish("tasks", 2, "update", project_id=8)
        local.publish("notifications", 3, "insert")

        assert [c["id"] for c in local.since(0, project_ids=[7])["changes"]] == [1]
        assert local.since(0, tables=[])["changes"] == []

    def test_events_carry_their_project(self, db_session, project, task):
        before = feed.last_seq
        task.title = "Pintar quarto"
        db_session.commit()

        change = feed.since(before, ["tasks"])["changes"][0]

        assert change["project_id"] == project.id

    def test_client_only_sees_own_projects(self, client, db_session, client_user, project):
        other_client = make_user(db_session, Role.CLIENT, email="other-client@example.com")
        foreign = make_project(db_session, client=other_client, name="Casa Verde")
        login(client, client_user)
        start = client.get("/changes").json()["last_seq"]

        foreign.progress_percentage = 70
        project.progress_percentage = 90
        db_session.commit()

        data = client.get(f"/changes?since={start}&tables=projects").json()
        assert [(c["table"], c["id"]) for c in data["changes"]] == [("projects", project.id)]

    def test_worker_cannot_watch_projects(self, client, db_session, worker, project):
        login(client, worker)
        start = client.get("/changes").json()["last_seq"]
        project.progress_percentage = 90
        db_session.commit()

        assert client.get(f"/changes?since={start}&tables=projects").json()["changes"] == []
        assert client.get(f"/changes?since={start}").json()["changes"] == []
