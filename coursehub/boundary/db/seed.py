"""
Demo data seeder.

Replaces every row with a small catalog: instructors (ADMIN), students,
tags, courses with curriculum, enrollments, progress and reviews. Runs
in one transaction, so a failure leaves the previous data in place.

Dependencies: sqlalchemy, bcrypt (via user_service), coursehub.boundary.db.CRUD
System role: Development and demo database population

Usage:
    python -m coursehub.boundary.db.seed
"""

import asyncio
import logging
from datetime import timedelta
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.user_service import hash_password
from coursehub.boundary.db.base import utcnow
from coursehub.boundary.db.CRUD import (
    course_crud,
    enrollment_crud,
    lesson_crud,
    progress_crud,
    review_crud,
    section_crud,
    tag_crud,
    user_crud,
)
from coursehub.boundary.db.models import (
    CourseModel,
    CourseStatus,
    CourseTagModel,
    EnrollmentModel,
    LessonModel,
    ProgressModel,
    ReviewModel,
    SectionModel,
    TagModel,
    UserModel,
    UserRole,
)

logger = logging.getLogger(__name__)

INSTRUCTOR_PASSWORD = "instructor123"
STUDENT_PASSWORD = "student123"

INSTRUCTORS = [
    ("Dr. Sarah Chen", "sarah.chen@coursehub.dev"),
    ("Prof. Michael Rodriguez", "michael.rodriguez@coursehub.dev"),
    ("Dr. Lisa Wang", "lisa.wang@coursehub.dev"),
]

STUDENTS = [
    ("John Doe", "john.doe@student.dev"),
    ("Jane Smith", "jane.smith@student.dev"),
    ("Mike Johnson", "mike.johnson@student.dev"),
    ("Emma Davis", "emma.davis@student.dev"),
]

TAGS = [
    "CPU Architecture",
    "Assembly Language",
    "Embedded Systems",
    "Digital Design",
    "Performance Optimization",
]

# (instructor index, course fields, tag names, [(section title, [(lesson title, seconds, preview)])])
COURSES: list[tuple[int, dict[str, Any], list[str], list[tuple[str, list[tuple[str, int, bool]]]]]] = [
    (
        0,
        {
            "slug": "complete-cpu-architecture-masterclass",
            "title": "Complete CPU Architecture Masterclass",
            "subtitle": "From microprocessors to advanced computer systems",
            "description": "Instruction sets, pipelining, caching and performance tuning of modern processors.",
            "price_cents": 8999,
            "status": CourseStatus.PUBLISHED,
            "category": "Computer Architecture",
            "level": "Intermediate",
            "language": "English",
        },
        ["CPU Architecture", "Performance Optimization"],
        [
            ("Foundations", [("What a CPU does", 540, True), ("Registers and the ALU", 780, False)]),
            ("Pipelines", [("Five-stage pipeline", 900, False), ("Hazards and forwarding", 1020, False)]),
        ],
    ),
    (
        1,
        {
            "slug": "x86-assembly-language-programming",
            "title": "x86 Assembly Language Programming",
            "subtitle": "Low-level programming and system optimization",
            "description": "Registers, memory addressing and calling conventions, written by hand.",
            "price_cents": 7999,
            "status": CourseStatus.PUBLISHED,
            "category": "Assembly Programming",
            "level": "Advanced",
            "language": "English",
        },
        ["Assembly Language", "CPU Architecture"],
        [
            ("Getting started", [("Toolchain setup", 420, True), ("Hello, registers", 660, False)]),
            ("Control flow", [("Jumps and flags", 720, False)]),
        ],
    ),
    (
        2,
        {
            "slug": "embedded-systems-with-microcontrollers",
            "title": "Embedded Systems with Microcontrollers",
            "subtitle": "Build real devices on bare metal",
            "description": "GPIO, timers, interrupts and peripherals on low-cost boards.",
            "price_cents": 0,
            "status": CourseStatus.PUBLISHED,
            "category": "Embedded Systems",
            "level": "Beginner",
            "language": "English",
        },
        ["Embedded Systems", "Digital Design"],
        [
            ("Blinking lights", [("Your first board", 480, True), ("Timers", 600, False)]),
        ],
    ),
    (
        0,
        {
            "slug": "risc-v-from-scratch",
            "title": "RISC-V from Scratch",
            "subtitle": "Design a core in a hardware description language",
            "description": "Work in progress: a single-cycle RISC-V core, then a pipelined one.",
            "price_cents": 4999,
            "status": CourseStatus.DRAFT,
            "category": "Computer Architecture",
            "level": "Advanced",
            "language": "English",
        },
        ["CPU Architecture", "Digital Design"],
        [],
    ),
]

# (student index, course index, rating, comment)
REVIEWS = [
    (0, 0, 5, "Clear explanations of pipelining."),
    (1, 0, 4, "Great course, a bit fast in places."),
    (2, 1, 5, None),
    (3, 2, 4, "Perfect first embedded course."),
]


async def clear_all(session: AsyncSession) -> None:
    """Delete every row, children before parents."""
    for model in (
        ProgressModel,
        EnrollmentModel,
        ReviewModel,
        CourseTagModel,
        LessonModel,
        SectionModel,
        CourseModel,
        TagModel,
        UserModel,
    ):
        await session.execute(delete(model))


async def seed_demo_data(session: AsyncSession, bcrypt_rounds: int = 12) -> dict[str, int]:
    """
    Replace the database contents with the demo catalog.

    Args:
        session: Async database session; committed on success
        bcrypt_rounds: Cost for the shared demo password hashes

    Returns:
        dict: Number of rows created per entity
    """
    try:
        await clear_all(session)

        instructor_hash = await asyncio.to_thread(hash_password, INSTRUCTOR_PASSWORD, bcrypt_rounds)
        student_hash = await asyncio.to_thread(hash_password, STUDENT_PASSWORD, bcrypt_rounds)

        instructors = [
            await user_crud.create(
                session, name=name, email=email, password_hash=instructor_hash, role=UserRole.ADMIN
            )
            for name, email in INSTRUCTORS
        ]
        students = [
            await user_crud.create(
                session, name=name, email=email, password_hash=student_hash, role=UserRole.STUDENT
            )
            for name, email in STUDENTS
        ]
        tags = {name: await tag_crud.create(session, name=name) for name in TAGS}

        courses = []
        first_lessons = []
        lesson_count = 0
        for instructor_index, fields, tag_names, sections in COURSES:
            course = await course_crud.create(
                session, created_by_id=instructors[instructor_index].id, **fields
            )
            courses.append(course)
            for tag_name in tag_names:
                await tag_crud.attach(session, course.id, tags[tag_name].id)

            course_lessons = []
            for section_order, (section_title, lessons) in enumerate(sections):
                section = await section_crud.create(
                    session, title=section_title, order=section_order, course_id=course.id
                )
                for lesson_order, (lesson_title, duration, preview) in enumerate(lessons):
                    lesson = await lesson_crud.create(
                        session,
                        title=lesson_title,
                        slug=lesson_title.lower().replace(",", "").replace(" ", "-"),
                        order=lesson_order,
                        duration_sec=duration,
                        free_preview=preview,
                        section_id=section.id,
                        video_url=f"https://videos.coursehub.dev/{course.slug}/{section_order}-{lesson_order}.mp4",
                    )
                    course_lessons.append(lesson)
            lesson_count += len(course_lessons)
            first_lessons.append(course_lessons[0] if course_lessons else None)

        # Spread enrollments over the last two months so the growth figure is non-trivial.
        now = utcnow()
        enrollment_count = 0
        published = [c for c in courses if c.status == CourseStatus.PUBLISHED]
        for student_index, student in enumerate(students):
            for course_index, course in enumerate(published):
                if (student_index + course_index) % 2:
                    continue
                await enrollment_crud.create(
                    session,
                    user_id=student.id,
                    course_id=course.id,
                    created_at=now - timedelta(days=7 + 12 * student_index + course_index),
                )
                enrollment_count += 1
                first_lesson = first_lessons[courses.index(course)]
                if first_lesson is not None:
                    await progress_crud.upsert_position(
                        session,
                        user_id=student.id,
                        lesson_id=first_lesson.id,
                        position_sec=first_lesson.duration_sec or 0,
                        completed=True,
                    )

        for student_index, course_index, rating, comment in REVIEWS:
            await review_crud.upsert_review(
                session,
                user_id=students[student_index].id,
                course_id=courses[course_index].id,
                rating=rating,
                comment=comment,
            )

        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error("Seeding failed", extra={"error": str(e)})
        raise

    counts = {
        "users": len(instructors) + len(students),
        "tags": len(tags),
        "courses": len(courses),
        "lessons": lesson_count,
        "enrollments": enrollment_count,
        "reviews": len(REVIEWS),
    }
    logger.info("Demo data seeded", extra=counts)
    return counts


async def _main() -> None:
    from coursehub.boundary.db.connection import dispose_async_engine, get_async_session_factory
    from coursehub.boundary.db.create_tables import create_all_tables
    from coursehub.configs import get_settings

    try:
        await create_all_tables()
        async with get_async_session_factory()() as session:
            await seed_demo_data(session, bcrypt_rounds=get_settings().auth.bcrypt_rounds)
    finally:
        await dispose_async_engine()


if __name__ == "__main__":
    from coursehub.configs import get_settings
    from coursehub.observability.logger import configure_logging

    configure_logging(get_settings().log_level)
    asyncio.run(_main())
