"""
Courses API Router.

Covers courses, their lessons and per-member progress. Course and lesson
mutations are restricted to the course instructor.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.courses import (
    ArchiveCourseCommand,
    ArchiveCourseHandler,
    CreateCourseCommand,
    CreateCourseHandler,
    PublishCourseCommand,
    PublishCourseHandler,
    UpdateCourseCommand,
    UpdateCourseHandler,
)
from community_os.application.commands.lessons import (
    ArchiveLessonCommand,
    ArchiveLessonHandler,
    CreateLessonCommand,
    CreateLessonHandler,
    ReorderLessonCommand,
    ReorderLessonHandler,
    SetDripScheduleCommand,
    SetDripScheduleHandler,
    UpdateLessonCommand,
    UpdateLessonHandler,
)
from community_os.application.commands.progress import (
    MarkCompleteCommand,
    MarkCompleteHandler,
    TrackProgressCommand,
    TrackProgressHandler,
)
from community_os.application.dto.course import CourseDto, LessonDto, ProgressDto
from community_os.application.queries.courses import (
    GetCourseHandler,
    GetCourseQuery,
    ListCoursesHandler,
    ListCoursesQuery,
)
from community_os.application.queries.lessons import (
    GetLessonHandler,
    GetLessonQuery,
    ListLessonsHandler,
    ListLessonsQuery,
)
from community_os.application.queries.progress import GetProgressHandler, GetProgressQuery
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.courses import (
    CreateCourseSchema,
    CreateLessonSchema,
    LessonProgressSchema,
    ReorderLessonSchema,
    SetDripScheduleSchema,
    UpdateCourseSchema,
    UpdateLessonSchema,
)

router = APIRouter(prefix="/api", tags=["courses"])


# ==================== COURSES ====================


@router.post("/courses", response_model=CourseDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_course(
    body: CreateCourseSchema,
    handler: FromDishka[CreateCourseHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a draft course taught by the caller."""
    command = CreateCourseCommand(
        community_id=body.community_id,
        title=body.title,
        description=body.description,
        instructor_id=current_user.user_id,
        payment_tier_id=body.payment_tier_id,
    )
    return await handler.execute(command)


@router.get("/communities/{community_id}/courses", response_model=list[CourseDto])
@inject
async def list_courses(
    community_id: str,
    handler: FromDishka[ListCoursesHandler],
    published_only: bool = Query(default=False, alias="publishedOnly"),
):
    query = ListCoursesQuery(community_id=community_id, published_only=published_only)
    return await handler.execute(query)


@router.get("/courses/{course_id}", response_model=CourseDto)
@inject
async def get_course(course_id: str, handler: FromDishka[GetCourseHandler]):
    return await handler.execute(GetCourseQuery(course_id=course_id))


@router.patch("/courses/{course_id}", response_model=CourseDto)
@inject
async def update_course(
    course_id: str,
    body: UpdateCourseSchema,
    handler: FromDishka[UpdateCourseHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = UpdateCourseCommand(
        course_id=course_id,
        requester_id=current_user.user_id,
        title=body.title,
        description=body.description,
    )
    return await handler.execute(command)


@router.post("/courses/{course_id}/publish", response_model=CourseDto)
@inject
async def publish_course(
    course_id: str,
    handler: FromDishka[PublishCourseHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Publish a draft course."""
    command = PublishCourseCommand(course_id=course_id, requester_id=current_user.user_id)
    return await handler.execute(command)


@router.delete("/courses/{course_id}", response_model=CourseDto)
@inject
async def archive_course(
    course_id: str,
    handler: FromDishka[ArchiveCourseHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = ArchiveCourseCommand(course_id=course_id, requester_id=current_user.user_id)
    return await handler.execute(command)


# ==================== LESSONS ====================


@router.post(
    "/courses/{course_id}/lessons",
    response_model=LessonDto,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_lesson(
    course_id: str,
    body: CreateLessonSchema,
    handler: FromDishka[CreateLessonHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = CreateLessonCommand(
        course_id=course_id,
        requester_id=current_user.user_id,
        title=body.title,
        content=body.content,
        type=body.type,
        video_url=body.video_url,
        pdf_url=body.pdf_url,
        order=body.order,
        drip_available_at=body.drip_available_at,
    )
    return await handler.execute(command)


@router.get("/courses/{course_id}/lessons", response_model=list[LessonDto])
@inject
async def list_lessons(
    course_id: str,
    handler: FromDishka[ListLessonsHandler],
    available_only: bool = Query(default=False, alias="availableOnly"),
):
    """Lessons in display order; availableOnly hides lessons still locked by drip."""
    query = ListLessonsQuery(course_id=course_id, available_only=available_only)
    return await handler.execute(query)


@router.get("/lessons/{lesson_id}", response_model=LessonDto)
@inject
async def get_lesson(lesson_id: str, handler: FromDishka[GetLessonHandler]):
    return await handler.execute(GetLessonQuery(lesson_id=lesson_id))


@router.patch("/lessons/{lesson_id}", response_model=LessonDto)
@inject
async def update_lesson(
    lesson_id: str,
    body: UpdateLessonSchema,
    handler: FromDishka[UpdateLessonHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = UpdateLessonCommand(
        lesson_id=lesson_id,
        requester_id=current_user.user_id,
        title=body.title,
        content=body.content,
        video_url=body.video_url,
        pdf_url=body.pdf_url,
    )
    return await handler.execute(command)


@router.put("/lessons/{lesson_id}/order", response_model=LessonDto)
@inject
async def reorder_lesson(
    lesson_id: str,
    body: ReorderLessonSchema,
    handler: FromDishka[ReorderLessonHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = ReorderLessonCommand(
        lesson_id=lesson_id, requester_id=current_user.user_id, order=body.order
    )
    return await handler.execute(command)


@router.put("/lessons/{lesson_id}/drip", response_model=LessonDto)
@inject
async def set_drip_schedule(
    lesson_id: str,
    body: SetDripScheduleSchema,
    handler: FromDishka[SetDripScheduleHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Set or clear (availableAt: null) the date a lesson unlocks."""
    command = SetDripScheduleCommand(
        lesson_id=lesson_id,
        requester_id=current_user.user_id,
        available_at=body.available_at,
    )
    return await handler.execute(command)


@router.delete("/lessons/{lesson_id}", response_model=LessonDto)
@inject
async def archive_lesson(
    lesson_id: str,
    handler: FromDishka[ArchiveLessonHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = ArchiveLessonCommand(lesson_id=lesson_id, requester_id=current_user.user_id)
    return await handler.execute(command)


# ==================== PROGRESS ====================


@router.get("/courses/{course_id}/progress", response_model=Optional[ProgressDto])
@inject
async def get_progress(
    course_id: str,
    handler: FromDishka[GetProgressHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """The caller's progress, or null before the first tracked lesson."""
    query = GetProgressQuery(user_id=current_user.user_id, course_id=course_id)
    return await handler.execute(query)


@router.post("/courses/{course_id}/progress", response_model=ProgressDto)
@inject
async def track_progress(
    course_id: str,
    body: LessonProgressSchema,
    handler: FromDishka[TrackProgressHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = TrackProgressCommand(
        user_id=current_user.user_id, course_id=course_id, lesson_id=body.lesson_id
    )
    return await handler.execute(command)


@router.post("/progress/{progress_id}/complete", response_model=ProgressDto)
@inject
async def mark_lesson_complete(
    progress_id: str,
    body: LessonProgressSchema,
    handler: FromDishka[MarkCompleteHandler],
):
    command = MarkCompleteCommand(progress_id=progress_id, lesson_id=body.lesson_id)
    return await handler.execute(command)
