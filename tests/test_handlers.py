"""
Use case tests that run handlers directly against the in-memory repositories.
"""

from pathlib import Path
from uuid import uuid4

import pytest

from community_os.application.commands.certificates import GenerateCertificateHandler
from community_os.application.commands.notifications import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    notify_safely,
)
from community_os.application.commands.progress import TrackProgressCommand, TrackProgressHandler
from community_os.application.queries.users import GetUserHandler, GetUserQuery
from community_os.application.common.errors import status_for_code, translate_errors
from community_os.application.errors import (
    CourseError,
    CourseErrorCode,
    NotificationError,
    NotificationErrorCode,
    PostError,
    PostErrorCode,
    UserError,
    UserErrorCode,
)
from community_os.domain.entities import Course, Lesson, User
from community_os.domain.exceptions import DomainValidationError
from community_os.domain.ports.services import (
    CertificateRenderer,
    CertificateRenderingError,
    EmailSender,
)
from community_os.domain.value_objects import Role
from community_os.infrastructure.persistence.memory import (
    MemoryCertificateRepository,
    MemoryCourseProgressRepository,
    MemoryCourseRepository,
    MemoryLessonRepository,
    MemoryNotificationRepository,
    MemoryUserRepository,
)
from community_os.setup.ioc.container import MemoryPersistenceProvider, persistence_provider


class RecordingEmailSender(EmailSender):
    def __init__(self):
        self.sent = []

    async def send(self, to_address: str, subject: str, body: str) -> bool:
        self.sent.append((to_address, subject, body))
        return True


class UntouchableUserRepository(MemoryUserRepository):
    async def find_by_id(self, user_id):
        raise AssertionError("repository must not be queried")


class BrokenRenderer(CertificateRenderer):
    async def render(self, certificate) -> str:
        raise CertificateRenderingError("disk full")

    def path_for(self, certificate_id: str) -> Path:
        return Path("/nonexistent") / f"{certificate_id}.pdf"


async def seed_user(store, name="Grace Hopper", email=None):
    user = User.create(
        email=email or f"{uuid4().hex[:8]}@example.com",
        role=Role.MEMBER,
        community_id="community-1",
        name=name,
    )
    return await MemoryUserRepository(store).create(user)


class TestErrorStatus:
    @pytest.mark.parametrize(
        "code,status",
        [
            ("INTERNAL_SERVER_ERROR", 500),
            ("STRIPE_ERROR", 500),
            ("UNAUTHORIZED", 403),
            ("NOT_OWNED_BY_USER", 403),
            ("POST_NOT_FOUND", 404),
            ("POST_ALREADY_PUBLISHED", 409),
            ("CANNOT_MODIFY_ARCHIVED_POST", 409),
            ("SAME_OWNER", 409),
            ("EMAIL_ALREADY_EXISTS", 409),
            ("MAX_TIERS_REACHED", 409),
            ("INVALID_TITLE", 400),
        ],
    )
    def test_status_for_code(self, code, status):
        assert status_for_code(code) == status

    def test_feature_conflict_codes(self):
        assert PostError(PostErrorCode.POST_NOT_PUBLISHED).status_code == 409
        assert status_for_code("POST_NOT_PUBLISHED") == 400

    def test_default_message_from_code(self):
        error = CourseError(CourseErrorCode.COURSE_NOT_FOUND)
        assert error.message == "Course not found"

    def test_from_domain_maps_field(self):
        error = CourseError.from_domain(DomainValidationError("Title too short", field="title"))
        assert error.code == CourseErrorCode.INVALID_TITLE
        assert error.message == "Title too short"

    def test_from_domain_falls_back_to_invalid_input(self):
        error = CourseError.from_domain(DomainValidationError("Odd", field="unknown"))
        assert error.code == CourseErrorCode.INVALID_INPUT


class TestTranslateErrors:
    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_internal_error(self):
        @translate_errors(CourseError)
        async def explode():
            raise RuntimeError("connection reset")

        with pytest.raises(CourseError) as exc_info:
            await explode()
        assert exc_info.value.code == CourseErrorCode.INTERNAL_SERVER_ERROR
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_own_error_passes_through(self):
        @translate_errors(CourseError)
        async def missing():
            raise CourseError(CourseErrorCode.COURSE_NOT_FOUND)

        with pytest.raises(CourseError) as exc_info:
            await missing()
        assert exc_info.value.code == CourseErrorCode.COURSE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_domain_validation_is_translated(self):
        @translate_errors(CourseError)
        async def invalid():
            raise DomainValidationError("Description required", field="description")

        with pytest.raises(CourseError) as exc_info:
            await invalid()
        assert exc_info.value.code == CourseErrorCode.INVALID_DESCRIPTION


class TestGetUser:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["", "   "])
    async def test_blank_id_is_rejected_before_lookup(self, store, user_id):
        handler = GetUserHandler(UntouchableUserRepository(store))

        with pytest.raises(UserError) as exc_info:
            await handler.execute(GetUserQuery(user_id=user_id))

        assert exc_info.value.code == UserErrorCode.INVALID_INPUT
        assert exc_info.value.status_code == 400


class TestCreateNotification:
    @pytest.fixture
    def email_sender(self):
        return RecordingEmailSender()

    @pytest.fixture
    def handler(self, store, email_sender):
        return CreateNotificationHandler(
            MemoryNotificationRepository(store), MemoryUserRepository(store), email_sender
        )

    @pytest.mark.asyncio
    async def test_creates_and_emails(self, store, handler, email_sender):
        recipient = await seed_user(store, email="grace@example.com")
        actor = await seed_user(store, name="Alan Turing")

        dto = await handler.execute(
            CreateNotificationCommand(
                user_id=recipient.id,
                community_id="community-1",
                type="LIKE",
                message="Alan liked your post",
                actor_id=actor.id,
            )
        )

        assert dto.actor_name == "Alan Turing"
        assert dto.is_read is False
        assert email_sender.sent == [("grace@example.com", "New notification", "Alan liked your post")]
        assert await MemoryNotificationRepository(store).count_unread(recipient.id) == 1

    @pytest.mark.asyncio
    async def test_unknown_actor(self, store, handler):
        recipient = await seed_user(store)
        with pytest.raises(NotificationError) as exc_info:
            await handler.execute(
                CreateNotificationCommand(
                    user_id=recipient.id,
                    community_id="community-1",
                    type="LIKE",
                    message="Someone liked your post",
                    actor_id="ghost",
                )
            )
        assert exc_info.value.code == NotificationErrorCode.ACTOR_NOT_FOUND

    @pytest.mark.asyncio
    async def test_notify_safely_swallows_failures(self, handler, email_sender):
        delivered = await notify_safely(
            handler,
            CreateNotificationCommand(
                user_id="ghost", community_id="community-1", type="REPLY", message="Hi"
            ),
        )
        assert delivered is False
        assert email_sender.sent == []


class TestTrackProgressCertificate:
    @pytest.mark.asyncio
    async def test_rendering_failure_does_not_fail_progress(self, store):
        instructor = await seed_user(store, name="Instructor")
        learner = await seed_user(store, name="Learner")
        course = await MemoryCourseRepository(store).create(
            Course.create(
                community_id="community-1",
                title="Async Python",
                description="Event loops from the ground up",
                instructor_id=instructor.id,
            )
        )
        lesson = await MemoryLessonRepository(store).create(
            Lesson.create(
                course_id=course.id, title="Intro", content="Welcome", type="TEXT", order=0
            )
        )

        generate = GenerateCertificateHandler(
            MemoryCertificateRepository(store),
            MemoryCourseRepository(store),
            MemoryUserRepository(store),
            MemoryCourseProgressRepository(store),
            BrokenRenderer(),
        )
        handler = TrackProgressHandler(
            MemoryCourseProgressRepository(store),
            MemoryCourseRepository(store),
            MemoryLessonRepository(store),
            MemoryUserRepository(store),
            generate,
        )

        dto = await handler.execute(
            TrackProgressCommand(user_id=learner.id, course_id=course.id, lesson_id=lesson.id)
        )

        assert dto.completion_percentage == 100
        assert dto.completed_at is not None
        assert await MemoryCertificateRepository(store).find_by_user_id(learner.id) == []


class TestPersistenceSelection:
    def test_memory_backend(self):
        assert isinstance(persistence_provider("memory"), MemoryPersistenceProvider)

    def test_testing_environment_uses_memory(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "testing")
        assert isinstance(persistence_provider(), MemoryPersistenceProvider)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            persistence_provider("sqlite")
