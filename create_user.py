from datetime import date, timedelta

from app.db.session import engine, session_scope
from app.db.base import Base
from app.db.models.project import Project, ProjectStatus
from app.db.models.task import Task, Priority
from app.db.models.user import Account, Role
from app.services import auth as auth_service

DEMO_USERS = [
    ("admin@alaobra.com", "admin123", "Admin User", Role.ADMIN),
    ("worker@alaobra.com", "worker123", "Test Worker", Role.WORKER),
    ("client@alaobra.com", "client123", "Test Client", Role.CLIENT),
]

def create_initial_data():
    # Create Tables
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)

    with session_scope() as db:
        seed(db)

def seed(db):
    profiles = {}

    for email, password, full_name, role in DEMO_USERS:
        account = db.query(Account).filter(Account.email == email).first()
        if account:
            print(f"{email} already exists.")
            profiles[role] = account.profile
            continue
        print(f"Creating {role} user {email}...")
        profiles[role] = auth_service.sign_up(db, email, password, full_name, role)

    # Demo site so the worker has something to check in to
    if not db.query(Project).first():
        print("Creating demo site...")
        project = Project(
            name="Casa Demo",
            address="Rua das Flores 10, Lisboa",
            description="Remodelação completa",
            client_id=profiles[Role.CLIENT].id if profiles.get(Role.CLIENT) else None,
            status=ProjectStatus.IN_PROGRESS,
            start_date=date.today(),
            expected_end_date=date.today() + timedelta(days=90),
            budget=50000,
            spent=12000,
            progress_percentage=20,
        )
        db.add(project)
        db.flush()
        db.add(Task(
            project_id=project.id,
            title="Assentar azulejos da cozinha",
            specifications="Azulejo 20x20, junta de 2mm",
            assigned_to=profiles[Role.WORKER].id if profiles.get(Role.WORKER) else None,
            priority=Priority.HIGH,
            due_date=date.today() + timedelta(days=7),
        ))
        db.commit()
        print("Demo site created.")

if __name__ == "__main__":
    create_initial_data()
