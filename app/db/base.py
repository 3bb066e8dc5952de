from app.db.base_class import Base

# Import models here so create_all finds them
from app.db.models.user import Account, Profile
from app.db.models.project import Project
from app.db.models.task import Task
from app.db.models.check_in import CheckIn
from app.db.models.photo import Photo
from app.db.models.issue import Issue
from app.db.models.notification import Notification
from app.db.models.activity import ActivityLog
