from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CourseDto
from community_os.application.errors import CourseError, CourseErrorCode
from community_os.application.mappers import to_course_dto
from community_os.domain.entities import Course
from community_os.domain.ports.repositories import (
    CommunityRepository,
    CourseRepository,
    UserRepository,
)


@dataclass(frozen=True)
class CreateCourseCommand(Command[CourseDto]):
    community_id: str
    title: str
    description: str
    instructor_id: str
    payment_tier_id: Optional[str] = None


class CreateCourseHandler(CommandHandler[CourseDto]):
    def __init__(
        self,
        course_repository: CourseRepository,
        community_repository: CommunityRepository,
        user_repository: UserRepository,
    ):
        self._course_repository = course_repository
        self._community_repository = community_repository
        self._user_repository = user_repository

    @translate_errors(CourseError)
    async def execute(self, command: CreateCourseCommand) -> CourseDto:
        if not command.community_id or not command.instructor_id:
            raise CourseError(
                CourseErrorCode.INVALID_INPUT, "Community ID and instructor ID are required"
            )

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None or community.is_archived:
            raise CourseError(CourseErrorCode.COMMUNITY_NOT_FOUND)
        instructor = await self._user_repository.find_by_id(command.instructor_id)
        if instructor is None or instructor.is_archived:
            raise CourseError(CourseErrorCode.INSTRUCTOR_NOT_FOUND)

        course = Course.create(
            community_id=command.community_id,
            title=command.title,
            description=command.description,
            instructor_id=command.instructor_id,
            payment_tier_id=command.payment_tier_id,
        )
        created = await self._course_repository.create(course)
        return to_course_dto(
            created, instructor.name or "Unknown", lesson_count=0, enrolled_count=0
        )
