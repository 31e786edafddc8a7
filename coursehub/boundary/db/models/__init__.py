"""
Database models package.

Exports:
  - UserModel, UserRole: Accounts
  - CourseModel, CourseStatus, SectionModel, LessonModel: Catalog and curriculum
  - EnrollmentModel, ProgressModel: Learner access and playback state
  - ReviewModel, ReviewStatus, TagModel, CourseTagModel: Feedback and labels

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Database model definitions for domain entities
"""

from coursehub.boundary.db.models.user_model import UserModel, UserRole
from coursehub.boundary.db.models.course_model import (
    CourseModel,
    CourseStatus,
    LessonModel,
    SectionModel,
)
from coursehub.boundary.db.models.enrollment_model import EnrollmentModel, ProgressModel
from coursehub.boundary.db.models.review_model import (
    CourseTagModel,
    ReviewModel,
    ReviewStatus,
    TagModel,
)

__all__ = [
    "UserModel",
    "UserRole",
    "CourseModel",
    "CourseStatus",
    "SectionModel",
    "LessonModel",
    "EnrollmentModel",
    "ProgressModel",
    "ReviewModel",
    "ReviewStatus",
    "TagModel",
    "CourseTagModel",
]
