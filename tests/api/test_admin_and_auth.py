"""
API tests for the admin console and signup endpoints.
"""

from datetime import datetime, timezone
from uuid import uuid4

from coursehub.api.deps.dependencies import (
    get_admin_stats_service,
    get_course_service,
    get_user_service,
)
from coursehub.boundary.db.models import CourseStatus, UserRole
from coursehub.core.exceptions import EmailAlreadyRegisteredError, ForbiddenError, UnauthorizedError

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)

ADMIN_HEADERS = {"X-User-Id": str(uuid4()), "X-User-Role": "admin"}


def stats_payload() -> dict:
    return {
        "total_courses": 4,
        "total_users": 12,
        "total_enrollments": 30,
        "published_courses": 3,
        "draft_courses": 1,
        "recent_courses": [
            {
                "id": uuid4(),
                "title": "Intro to CPUs",
                "slug": "intro-to-cpus",
                "created_by": "Ada Admin",
                "enrollments": 9,
                "created_at": NOW,
            }
        ],
        "recent_enrollments": [
            {
                "id": uuid4(),
                "user_name": "Sam Student",
                "user_email": "sam@student.dev",
                "course_title": "Intro to CPUs",
                "course_slug": "intro-to-cpus",
                "created_at": NOW,
            }
        ],
        "category_stats": [{"category": "Computer Architecture", "count": 2}],
        "enrollments_last_30_days": 7,
        "enrollment_growth": -12,
    }


def test_admin_stats_should_serialise_camel_case(client, mock_admin_stats_service):
    mock_admin_stats_service.get_stats.return_value = stats_payload()
    client.app.dependency_overrides[get_admin_stats_service] = lambda: mock_admin_stats_service

    response = client.get("/api/v1/admin/stats", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["totalEnrollments"] == 30
    assert data["enrollmentsLast30Days"] == 7
    assert data["enrollmentGrowth"] == -12
    assert data["recentEnrollments"][0]["userEmail"] == "sam@student.dev"
    assert data["categoryStats"] == [{"category": "Computer Architecture", "count": 2}]
    identity = mock_admin_stats_service.get_stats.await_args.args[0]
    assert identity.role == UserRole.ADMIN


def test_admin_stats_should_reject_students_and_anonymous(client, mock_admin_stats_service):
    client.app.dependency_overrides[get_admin_stats_service] = lambda: mock_admin_stats_service

    mock_admin_stats_service.get_stats.side_effect = ForbiddenError()
    forbidden = client.get(
        "/api/v1/admin/stats", headers={"X-User-Id": str(uuid4()), "X-User-Role": "STUDENT"}
    )
    mock_admin_stats_service.get_stats.side_effect = UnauthorizedError()
    anonymous = client.get("/api/v1/admin/stats")

    assert forbidden.status_code == 403
    assert anonymous.status_code == 401


def test_admin_courses_should_list_every_status(client, mock_course_service):
    mock_course_service.list_all_courses.return_value = [
        {
            "id": uuid4(),
            "slug": "wip",
            "title": "Work in progress",
            "status": CourseStatus.DRAFT,
            "price_cents": 0,
            "category": None,
            "created_at": NOW,
            "updated_at": NOW,
            "created_by": {"id": uuid4(), "name": "Ada Admin"},
            "section_count": 0,
            "lesson_count": 0,
            "enrollment_count": 0,
        }
    ]
    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get("/api/v1/admin/courses", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()[0]["status"] == "DRAFT"
    assert response.json()[0]["createdBy"]["name"] == "Ada Admin"


def test_admin_users_should_include_enrollments(client, mock_user_service):
    mock_user_service.list_users.return_value = [
        {
            "id": uuid4(),
            "name": "Sam Student",
            "email": "sam@student.dev",
            "role": UserRole.STUDENT,
            "image": None,
            "created_at": NOW,
            "enrolled_courses": ["Intro to CPUs"],
            "created_course_count": 0,
        }
    ]
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.get("/api/v1/admin/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    user = response.json()["users"][0]
    assert user["enrolledCourses"] == ["Intro to CPUs"]
    assert "passwordHash" not in user


def test_signup_should_return_201(client, mock_user_service):
    user_id = uuid4()
    mock_user_service.signup.return_value = {
        "id": user_id,
        "name": "Grace",
        "email": "grace@student.dev",
        "role": UserRole.STUDENT,
        "image": None,
        "created_at": NOW,
    }
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.post(
        "/api/v1/auth/signup",
        json={"name": "Grace", "email": "grace@student.dev", "password": "correct horse"},
    )

    assert response.status_code == 201
    assert response.json()["success"] is True
    assert response.json()["user"]["role"] == "STUDENT"
    mock_user_service.signup.assert_awaited_once_with(
        name="Grace", email="grace@student.dev", password="correct horse"
    )


def test_signup_with_short_password_should_be_422(client, mock_user_service):
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.post(
        "/api/v1/auth/signup",
        json={"name": "Grace", "email": "grace@student.dev", "password": "short"},
    )

    assert response.status_code == 422
    mock_user_service.signup.assert_not_called()


def test_signup_with_invalid_email_should_be_422(client, mock_user_service):
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.post(
        "/api/v1/auth/signup",
        json={"name": "Grace", "email": "not-an-email", "password": "correct horse"},
    )

    assert response.status_code == 422


def test_signup_with_registered_email_should_be_409(client, mock_user_service):
    mock_user_service.signup.side_effect = EmailAlreadyRegisteredError("grace@student.dev")
    client.app.dependency_overrides[get_user_service] = lambda: mock_user_service

    response = client.post(
        "/api/v1/auth/signup",
        json={"name": "Grace", "email": "grace@student.dev", "password": "correct horse"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"
