from app.models.submission import Submission
from app.models.app_flag import AppFlag

__all__ = ["Submission", "AppFlag"]
